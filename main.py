from __future__ import annotations
import streamlit as st
import re
import io
import logging
import pandas as pd
import numpy as np
from typing import List

from idea_summarizer.summarize import summarize, select_top, DEFAULT_NUM_SENTENCES, SUMMARY_SEPARATOR
from idea_summarizer.preprocessing import PreprocessConfig, split_sentences, tokenize
from idea_summarizer.frequency import build_frequency_model
from idea_summarizer.scoring import score_sentences, term_weight

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

def extract_markdown_text(md_content):
    """Extract plain text from Markdown content."""
    # Remove code blocks
    text = re.sub(r'```.*?```', '', md_content, flags=re.DOTALL)
    text = re.sub(r'`([^`]+)`', r'\1', text)
    # Remove headers
    text = re.sub(r'^#{1,6}\s+', '', text, flags=re.MULTILINE)
    # Remove bold and italic
    text = re.sub(r'\*{1,2}(.*?)\*{1,2}', r'\1', text)
    # Remove links
    text = re.sub(r'\[([^\]]+)\]\([^)]+\)', r'\1', text)
    # Remove list bullets
    text = re.sub(r'^[ \t]*[-*+][ \t]+', '', text, flags=re.MULTILINE)
    text = re.sub(r'\n\s*\n', '\n\n', text)
    return text.strip()

def extract_csv_ideas(csv_content: str, column: str = "idea") -> List[str]:
    """Read one idea per row from an exported ideas CSV."""
    df = pd.read_csv(io.StringIO(csv_content))
    # exports write the header as "Idea"
    matches = [c for c in df.columns if str(c).strip().lower() == column.lower()]
    if not matches:
        raise ValueError(f"CSV has no '{column}' column (found: {', '.join(map(str, df.columns))})")
    return [str(v) for v in df[matches[0]].dropna() if str(v).strip()]

def load_text_from_file(uploaded_file):
    """Load text content from uploaded file based on file type."""
    file_extension = uploaded_file.name.lower().split('.')[-1]
    content = uploaded_file.read().decode("utf-8")

    if file_extension == 'csv':
        return SUMMARY_SEPARATOR.join(extract_csv_ideas(content))
    elif file_extension == 'md':
        return extract_markdown_text(content)
    else:  # txt and other formats
        return content

def create_sidebar_controls():
    """Create sidebar controls for parameters."""
    st.sidebar.header("Parameters")
    num_sentences = st.sidebar.number_input(
        "Summary sentences",
        min_value=1,
        max_value=50,
        value=DEFAULT_NUM_SENTENCES,
        step=1,
        help="Number of sentences to extract"
    )
    min_sentence_length = st.sidebar.slider(
        "Minimum sentence length",
        min_value=0,
        max_value=100,
        value=20,
        help="Sentences this short or shorter (in characters) are ignored"
    )
    min_token_length = st.sidebar.slider(
        "Minimum word length",
        min_value=1,
        max_value=10,
        value=4,
        help="Shorter words are not scored"
    )
    dedupe = st.sidebar.checkbox(
        "Count each word once per sentence",
        value=False,
        help="Standard document frequency. Changes the ranking."
    )

    st.sidebar.header("Debug Options")
    debug_mode = st.sidebar.checkbox("Enable Debug Mode", value=False, help="Show detailed pipeline steps")

    cfg = PreprocessConfig(min_sentence_length=min_sentence_length, min_token_length=min_token_length)
    return int(num_sentences), cfg, dedupe, debug_mode

def debug_pipeline(text: str, num_sentences: int, cfg: PreprocessConfig, dedupe: bool):
    """Run the pipeline stage by stage and show what each one produced."""

    # Step 1: Sentence splitting
    st.header("✂️ Step 1: Sentence Splitting")
    with st.expander("Splitting Details", expanded=True):
        sentences = split_sentences(text, cfg)
        st.success(f"✅ Kept {len(sentences)} sentences longer than {cfg.min_sentence_length} characters")
        st.dataframe(pd.DataFrame([
            {"Sentence #": s.idx + 1, "Length": len(s.text), "Text": s.text} for s in sentences
        ]), use_container_width=True)

    if len(sentences) <= num_sentences:
        st.info(f"{len(sentences)} sentences <= {num_sentences} requested: the text is returned unchanged")
        return text

    # Step 2: Tokens and frequencies
    st.header("🔤 Step 2: Tokens & Frequencies")
    with st.expander("Frequency Details", expanded=True):
        corpus_tokens = tokenize(text, cfg)
        sentence_tokens = [tokenize(s.text, cfg) for s in sentences]
        model = build_frequency_model(corpus_tokens, sentence_tokens,
                                      sentence_count=len(sentences),
                                      dedupe_per_sentence=dedupe)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Total Words (original)", len(text.split()))
        with col2:
            st.metric("Total Tokens (scored)", model.total_tokens)
        with col3:
            st.metric("Unique Terms", len(model.term_frequency))

        freq_df = pd.DataFrame([
            {
                "Term": term,
                "Corpus Count": count,
                "Sentence DF": model.sentence_doc_frequency.get(term, 0),
                "Weight": round(term_weight(term, model), 5),
            }
            for term, count in model.term_frequency.items()
        ])
        if not freq_df.empty:
            freq_df = freq_df.sort_values("Corpus Count", ascending=False, kind="stable")
        st.dataframe(freq_df, use_container_width=True, height=250)

        negative = [t for t in model.term_frequency if term_weight(t, model) < 0]
        if negative:
            st.warning(f"{len(negative)} terms have a negative weight (DF above sentence count)")

    # Step 3: Scoring
    st.header("📊 Step 3: Sentence Scoring")
    with st.expander("Scoring Details", expanded=True):
        scored = score_sentences(sentences, model, cfg)
        scores = np.array([s.score for s in scored])
        st.dataframe(pd.DataFrame([
            {"Sentence #": s.idx + 1, "Score": f"{s.score:.5f}", "Text": s.text} for s in scored
        ]), use_container_width=True)

        col1, col2, col3 = st.columns(3)
        with col1:
            st.metric("Max Score", f"{scores.max():.5f}")
        with col2:
            st.metric("Mean Score", f"{np.mean(scores):.5f}")
        with col3:
            st.metric("Std Score", f"{np.std(scores):.5f}")
        st.bar_chart(pd.DataFrame({"score": scores}, index=[f"S{s.idx + 1}" for s in scored]))

    # Step 4: Selection
    st.header("📝 Step 4: Selection")
    with st.expander("Selection Details", expanded=True):
        selected = select_top(scored, num_sentences)
        ranked = sorted(scored, key=lambda s: s.score, reverse=True)
        st.dataframe(pd.DataFrame([
            {
                "Rank": rank + 1,
                "Sentence #": s.idx + 1,
                "Score": f"{s.score:.5f}",
                "Selected": "✅" if rank < num_sentences else "❌",
                "Text": s.text,
            }
            for rank, s in enumerate(ranked)
        ]), use_container_width=True)

    return SUMMARY_SEPARATOR.join(selected)

def main():
    st.title("Idea Summarizer")
    st.write("Paste idea descriptions or upload a file to extract the most representative sentences")

    num_sentences, cfg, dedupe, debug_mode = create_sidebar_controls()

    uploaded_file = st.file_uploader(
        "Choose a file",
        type=['txt', 'md', 'csv'],
        help="Plain text, Markdown, or an ideas CSV export with an 'idea' column"
    )

    if uploaded_file is not None:
        try:
            text = load_text_from_file(uploaded_file)
        except ValueError as e:
            st.error(str(e))
            return
        st.subheader("Original Text")
        st.text_area("Content", text, height=200, disabled=True)
    else:
        text = st.text_area("Ideas", "", height=200, help="Separate ideas with a blank line")

    if st.button("Generate Summary", type="primary"):
        try:
            if debug_mode:
                st.markdown("---")
                st.title("🔍 Pipeline Debug Mode")
                result = debug_pipeline(text, num_sentences, cfg, dedupe)
            else:
                with st.spinner("Generating summary..."):
                    result = summarize(text, num_sentences, cfg=cfg, dedupe_per_sentence=dedupe)

            st.markdown("---")
            st.header("📋 Final Summary")
            st.text_area("Generated Summary", result, height=200, disabled=True)

            col1, col2, col3 = st.columns(3)
            with col1:
                st.metric("Original Length", len(text.split()))
            with col2:
                st.metric("Summary Length", len(result.split()) if result else 0)
            with col3:
                compression = len(result.split()) / len(text.split()) if text.split() and result else 0
                st.metric("Actual Compression", f"{compression:.2%}")

        except Exception as e:
            st.error(f"Error generating summary: {str(e)}")
            st.exception(e)

if __name__ == "__main__":
    main()
