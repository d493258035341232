"""Desktop notebook that appends topic-tagged captures to a Markdown file."""

__version__ = "0.1.0"