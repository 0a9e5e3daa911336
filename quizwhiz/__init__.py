"""Terminal quiz system: make answer-key quizzes, take each once, and list the recorded scores."""

__version__ = "0.1.0"