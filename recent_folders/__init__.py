"""Recent Folders - ranked shortcuts to the folders you used last."""

__all__: list[str] = []
