class GenerationError(Exception):
    """The document could not be built or written."""
    pass
