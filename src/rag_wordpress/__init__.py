"""Question answering over WordPress posts: search, TF-IDF ranking, cited answers."""
