"""GTD task core: task state model and storage backends."""

__version__ = "0.1.0"
