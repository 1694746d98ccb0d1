"""Built-in demo corpus, loaded when no data file is given"""

from typing import List, Tuple

from .tfidf.engine import SearchEngine

# (title, content, url)
SAMPLE_DOCUMENTS: List[Tuple[str, str, str]] = [
    (
        "Introduction to C++ Programming",
        "C++ is a powerful and versatile programming language. It is used to develop operating "
        "systems, games, desktop applications and much more. C++ supports object-oriented programming.",
        "https://example.com/cpp-intro",
    ),
    (
        "Search Algorithms",
        "Search algorithms are fundamental in computer science. They include linear search, binary "
        "search, and more complex algorithms like those used in web search engines.",
        "https://example.com/search-algorithms",
    ),
    (
        "Data Structures in C++",
        "Data structures are essential for organizing and managing data efficiently. In C++ we have "
        "arrays, vectors, maps, sets and many other useful data structures.",
        "https://example.com/data-structures",
    ),
    (
        "Machine Learning with Python",
        "Python is the most popular language for machine learning. Libraries like TensorFlow, "
        "PyTorch and scikit-learn make it easy to implement machine learning algorithms.",
        "https://example.com/ml-python",
    ),
    (
        "Web Development with JavaScript",
        "JavaScript is essential for modern web development. It allows you to create interactive "
        "user interfaces and dynamic web applications. It is used in both frontend and backend.",
        "https://example.com/js-web",
    ),
]


def load_sample_documents(engine: SearchEngine) -> int:
    """Add the demo corpus to engine and return how many documents were added"""
    for title, content, url in SAMPLE_DOCUMENTS:
        engine.add_document(title, content, url)
    return len(SAMPLE_DOCUMENTS)
