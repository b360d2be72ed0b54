from .naming import NameNormalizer, trim_prefix
from .typemap import (Category, Conversion, TypeDescriptor, Typedef, classify,
                      is_void, target_type, to_native, to_target)
from .writer import BlankLineStrippingWriter, open_output, strip_blank_lines

__all__ = [
    'BlankLineStrippingWriter',
    'Category',
    'Conversion',
    'NameNormalizer',
    'TypeDescriptor',
    'Typedef',
    'classify',
    'is_void',
    'open_output',
    'strip_blank_lines',
    'target_type',
    'to_native',
    'to_target',
    'trim_prefix',
]
