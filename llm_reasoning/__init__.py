from .reasoner import (
    EMPTY_REASONING,
    ERROR_REASONING,
    STATIC_REASONING,
    ReasoningGenerator,
    build_prompt,
)
