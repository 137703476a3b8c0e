"""Document decoding: grammar backends and the closed value model.

Python 3.13+.
"""

from .decoders import (
    TOML_DECODER,
    YAML_DECODER,
    DocumentDecoder,
    TomlDecoder,
    YamlDecoder,
    decode_source,
)
from .values import (
    BoolValue,
    DocumentValue,
    FloatValue,
    IntValue,
    ListValue,
    NullValue,
    StringValue,
    TreeValue,
    UIntValue,
    from_native,
)

__all__ = [
    "TOML_DECODER",
    "YAML_DECODER",
    "BoolValue",
    "DocumentDecoder",
    "DocumentValue",
    "FloatValue",
    "IntValue",
    "ListValue",
    "NullValue",
    "StringValue",
    "TomlDecoder",
    "TreeValue",
    "UIntValue",
    "YamlDecoder",
    "decode_source",
    "from_native",
]
