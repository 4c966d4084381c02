from enum import Enum


class BoundaryPolicy(str, Enum):
    """What to do with invisible characters that sit between two word characters.

    ALWAYS_DELETE removes them with no replacement, so ``hello<ZWSP>world``
    becomes ``helloworld``. INSERT_SPACE_AT_WORD_BOUNDARY treats such a run as
    a word separator and leaves a single space in its place.
    """

    ALWAYS_DELETE = "always_delete"
    INSERT_SPACE_AT_WORD_BOUNDARY = "insert_space_at_word_boundary"
