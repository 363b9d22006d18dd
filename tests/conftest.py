import pytest

IDEAS = [
    "Add a shared calendar so remote teams can plan releases together.",
    "Offer flexible working hours for parents with young children.",
    "Create a mentoring program that pairs junior engineers with senior engineers.",
    "Replace paper expense forms with a mobile expense application.",
    "Hold a monthly demo day where teams present releases to the whole company.",
    "Introduce a quiet room for focused work without interruptions.",
    "Give every engineer a yearly budget for conferences and training.",
]

@pytest.fixture
def ideas():
    return list(IDEAS)

@pytest.fixture
def six_sentences():
    return " ".join([
        "Solar panels on the office roof would cut energy bills.",
        "Energy bills dropped when the warehouse installed solar panels.",
        "Employees could vote on which charity the company supports.",
        "A bike sharing scheme would reduce parking pressure downtown.",
        "Parking pressure downtown is the top complaint from visitors.",
        "The cafeteria should serve more vegetarian options daily.",
    ])
