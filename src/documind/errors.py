"""Exception family for documind.

Zero-result outcomes (no level-2 headers, no sentence terminators, hits
whose parent is missing) are not errors and never raise.
"""


class DocumindError(Exception):
    """Base class for documind errors."""


class SectionPathError(DocumindError):
    """Document path has no ``docs`` anchor directory to derive a section path from."""


class MissingCredentialsError(DocumindError):
    """A collaborator needs credentials that are not configured."""


class ParentStoreError(DocumindError):
    """Persisted parent store could not be read."""


class UnexpectedResponseError(DocumindError):
    """The language model returned a response without text content."""


class ChunksFileError(DocumindError):
    """A chunks file is missing, unreadable or holds invalid records."""
