from app.services.classifier import EducationalClassifier, default_classifier


def test_tutorial_is_educational():
    assert default_classifier.is_educational("Python Tutorial for Beginners", "")


def test_keyword_in_description_counts():
    assert default_classifier.is_educational("Python in 2024", "A complete course on Python")


def test_no_educational_keyword():
    assert not default_classifier.is_educational("My trip to Lisbon", "We saw the sea")


def test_non_educational_keyword_vetoes():
    assert not default_classifier.is_educational("Python Tutorial vlog", "")


def test_non_educational_keyword_in_description_vetoes():
    assert not default_classifier.is_educational("Python Tutorial", "my gaming setup")


def test_emoji_vetoes():
    assert not default_classifier.is_educational("Python Tutorial 🚀", "full course")
    assert not default_classifier.is_educational("Learn Python ☀", "")


def test_shallow_marker_vetoes():
    assert not default_classifier.is_educational("Python tutorial in short", "")
    assert not default_classifier.is_educational("Quick Python guide", "")


def test_extreme_duration_vetoes():
    assert not default_classifier.is_educational("10 hour Python course", "")


def test_relaxed_check_drops_only_disqualifiers():
    assert default_classifier.is_acceptable("My trip to Lisbon", "")
    assert not default_classifier.is_acceptable("Lisbon prank", "")
    assert not default_classifier.is_acceptable("Lisbon 😀", "")


def test_injected_keyword_sets():
    classifier = EducationalClassifier(
        educational_keywords={"recipe"},
        non_educational_keywords={"mukbang"},
    )
    assert classifier.is_educational("Pasta recipe", "")
    assert not classifier.is_educational("Python tutorial", "")
    assert not classifier.is_educational("Pasta recipe mukbang", "")
