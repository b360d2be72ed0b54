from .classifier import (Category, cgo_reference, classify, is_mapped, is_void,
                         known_type_names, resolve, target_type)
from .conversion import (Conversion, native_conversion, target_conversion,
                         to_native, to_target)
from .type_descriptor import TypeDescriptor, Typedef

__all__ = [
    'Category',
    'cgo_reference',
    'Conversion',
    'TypeDescriptor',
    'Typedef',
    'classify',
    'is_mapped',
    'is_void',
    'known_type_names',
    'native_conversion',
    'resolve',
    'target_conversion',
    'target_type',
    'to_native',
    'to_target',
]
