"""Classification of GL native type names into Go primitive categories."""

from enum import Enum
from typing import Optional

from .type_descriptor import VOID_NAMES, TypeDescriptor


class Category(Enum):
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOL = "bool"
    WORD = "int"
    ADDRESS = "uintptr"
    OPAQUE_POINTER = "unsafe.Pointer"
    VOID = "void"
    UNMAPPED = "unmapped"

    @property
    def go_type(self) -> Optional[str]:
        """Go spelling of the category, None when it has no Go counterpart."""
        if self in (Category.VOID, Category.UNMAPPED):
            return None
        return self.value


_SCALAR_TYPES: dict[str, Category] = {
    "GLbyte": Category.INT8,
    "GLubyte": Category.UINT8,
    "GLshort": Category.INT16,
    "GLushort": Category.UINT16,
    "GLint": Category.INT32,
    "GLuint": Category.UINT32,
    "GLint64": Category.INT64,
    "GLint64EXT": Category.INT64,
    "GLuint64": Category.UINT64,
    "GLuint64EXT": Category.UINT64,
    "GLfloat": Category.FLOAT32,
    "GLclampf": Category.FLOAT32,
    "GLdouble": Category.FLOAT64,
    "GLclampd": Category.FLOAT64,
    "GLclampx": Category.INT32,
    "GLsizei": Category.INT32,
    "GLfixed": Category.INT32,
    "GLchar": Category.INT8,
    "GLcharARB": Category.INT8,
    "GLboolean": Category.BOOL,
    "GLenum": Category.UINT32,
    "GLbitfield": Category.UINT32,
    # Go has no 16-bit float; the bit pattern is carried as uint16.
    "GLhalf": Category.UINT16,
    "GLhalfNV": Category.UINT16,
    "GLintptr": Category.WORD,
    "GLintptrARB": Category.WORD,
    "GLsizeiptr": Category.WORD,
    "GLsizeiptrARB": Category.WORD,
    "GLhandleARB": Category.ADDRESS,
    "GLeglImageOES": Category.ADDRESS,
    "GLeglImagesOES": Category.ADDRESS,
    "GLvdpauSurfaceNV": Category.ADDRESS,
    "GLvdpauSurfaceARB": Category.ADDRESS,
    "GLsync": Category.OPAQUE_POINTER,
}

# Callback types are always handed over as a bare pointer, whatever the
# declared indirection.
_CALLBACK_TYPES = frozenset({
    "GLDEBUGPROC",
    "GLDEBUGPROCARB",
    "GLDEBUGPROCKHR",
    "GLDEBUGPROCAMD",
})


def known_type_names() -> frozenset[str]:
    return frozenset(_SCALAR_TYPES) | _CALLBACK_TYPES | VOID_NAMES


def resolve(descriptor: TypeDescriptor) -> tuple[Category, int]:
    """Return the category and the indirection applied on top of it.

    The indirection differs from ``descriptor.pointer_depth`` for void
    pointers, whose first level is absorbed into the address category, and for
    callbacks, which never carry any.
    """
    depth = descriptor.pointer_depth
    if descriptor.name in VOID_NAMES:
        if depth == 0:
            return Category.VOID, 0
        if depth <= 2:
            return Category.ADDRESS, depth - 1
        return Category.UNMAPPED, depth
    if descriptor.name in _CALLBACK_TYPES:
        return Category.OPAQUE_POINTER, 0
    category = _SCALAR_TYPES.get(descriptor.name)
    if category is None:
        return Category.UNMAPPED, depth
    return category, depth


def classify(descriptor: TypeDescriptor) -> Category:
    return resolve(descriptor)[0]


def is_void(descriptor: TypeDescriptor) -> bool:
    return classify(descriptor) is Category.VOID


def is_mapped(descriptor: TypeDescriptor) -> bool:
    return classify(descriptor) is not Category.UNMAPPED


def cgo_reference(descriptor: TypeDescriptor) -> str:
    """Spell the native type the way cgo exposes it, e.g. ``*C.struct_foo``.

    cgo joins the words of elaborated names with underscores, so
    ``struct _cl_context`` is reachable as ``C.struct__cl_context``.
    """
    return f"{descriptor.pointers()}C.{'_'.join(descriptor.name.split())}"


def target_type(descriptor: TypeDescriptor) -> str:
    """Render the Go type for ``descriptor``.

    Unmapped names fall back to a cgo reference to the native name, keeping
    every declared pointer level. The bare void type renders as an empty
    string since it has no Go representation.
    """
    category, depth = resolve(descriptor)
    if category is Category.VOID:
        return ""
    if category is Category.UNMAPPED:
        return cgo_reference(descriptor)
    return "*" * depth + category.go_type
