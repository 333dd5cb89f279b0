"""Implementation modules behind the flat ``earclip`` API."""
