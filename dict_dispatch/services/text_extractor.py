"""Service for extracting the query text from the editor."""

import logging

from dict_dispatch.interfaces import EditorContext, InputSource
from dict_dispatch.models import Query, QueryKind

logger = logging.getLogger(__name__)


class TextExtractor:
    """Produce a Query from the editor context.

    Sources are tried in a fixed order and exactly one is used per call:

    1. the active region, which is deactivated once read
    2. the word at point, if it is not blank
    3. an interactive prompt
    """

    def __init__(
        self,
        context: EditorContext,
        input_source: InputSource,
        prompt: str = "Look up: ",
    ):
        """Initialize the extractor.

        Args:
            context: Editor to read the region and cursor from
            input_source: Where to ask when there is nothing at point
            prompt: Prompt shown for interactive input
        """
        self.context = context
        self.input_source = input_source
        self.prompt = prompt

    def extract(self) -> Query | None:
        """Extract the text to look up.

        Returns:
            The Query, or None if the user cancelled the prompt
        """
        if self.context.region_active():
            text = self.context.region_text()
            self.context.deactivate_region()
            if text.strip():
                logger.debug("Using active region")
                return Query(text, QueryKind.TEXT)

        word = self.context.word_at_point()
        if word and word.strip():
            logger.debug("Using word at point")
            return Query(word.strip(), QueryKind.WORD)

        answer = self.input_source.read_string(self.prompt)
        if answer is None or not answer.strip():
            logger.debug("Prompt cancelled")
            return None
        return Query(answer.strip(), QueryKind.WORD)
