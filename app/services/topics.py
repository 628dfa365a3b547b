import random

STARTER_TOPICS = (
    "Python programming",
    "Introduction to machine learning",
    "Basic guitar chords",
    "Cooking Italian pasta",
    "Digital marketing fundamentals",
    "Public speaking tips",
    "Photography basics",
    "Web accessibility",
    "React hooks overview",
    "Data visualization",
)


def random_topic() -> str:
    return random.choice(STARTER_TOPICS)
