from nnfold.core import (
    Config,
    DomainWarning,
    LengthMismatch,
    as_sequence,
    using_config,
)

# Explicit exports for `from nnfold import ...`
__all__ = [
    "Config",
    "DomainWarning",
    "LengthMismatch",
    "as_sequence",
    "using_config",
]
