import pytest

from cgobind.typemap import (Category, TypeDescriptor, cgo_reference,
                             classify, is_mapped, is_void, known_type_names,
                             resolve, target_type)

# Every name of the scalar table with its category and Go spelling.
SCALAR_EXPECTATIONS = [
    ("GLbyte", Category.INT8, "int8"),
    ("GLubyte", Category.UINT8, "uint8"),
    ("GLshort", Category.INT16, "int16"),
    ("GLushort", Category.UINT16, "uint16"),
    ("GLint", Category.INT32, "int32"),
    ("GLuint", Category.UINT32, "uint32"),
    ("GLint64", Category.INT64, "int64"),
    ("GLint64EXT", Category.INT64, "int64"),
    ("GLuint64", Category.UINT64, "uint64"),
    ("GLuint64EXT", Category.UINT64, "uint64"),
    ("GLfloat", Category.FLOAT32, "float32"),
    ("GLclampf", Category.FLOAT32, "float32"),
    ("GLdouble", Category.FLOAT64, "float64"),
    ("GLclampd", Category.FLOAT64, "float64"),
    ("GLclampx", Category.INT32, "int32"),
    ("GLsizei", Category.INT32, "int32"),
    ("GLfixed", Category.INT32, "int32"),
    ("GLchar", Category.INT8, "int8"),
    ("GLcharARB", Category.INT8, "int8"),
    ("GLboolean", Category.BOOL, "bool"),
    ("GLenum", Category.UINT32, "uint32"),
    ("GLbitfield", Category.UINT32, "uint32"),
    ("GLhalf", Category.UINT16, "uint16"),
    ("GLhalfNV", Category.UINT16, "uint16"),
    ("GLintptr", Category.WORD, "int"),
    ("GLintptrARB", Category.WORD, "int"),
    ("GLsizeiptr", Category.WORD, "int"),
    ("GLsizeiptrARB", Category.WORD, "int"),
    ("GLhandleARB", Category.ADDRESS, "uintptr"),
    ("GLeglImageOES", Category.ADDRESS, "uintptr"),
    ("GLeglImagesOES", Category.ADDRESS, "uintptr"),
    ("GLvdpauSurfaceNV", Category.ADDRESS, "uintptr"),
    ("GLvdpauSurfaceARB", Category.ADDRESS, "uintptr"),
    ("GLsync", Category.OPAQUE_POINTER, "unsafe.Pointer"),
]

CALLBACK_NAMES = ["GLDEBUGPROC", "GLDEBUGPROCARB", "GLDEBUGPROCKHR", "GLDEBUGPROCAMD"]


def test_expectations_cover_every_known_name():
    covered = {name for name, _, _ in SCALAR_EXPECTATIONS}
    covered.update(CALLBACK_NAMES)
    covered.update({"void", "GLvoid"})
    assert covered == known_type_names()


@pytest.mark.parametrize("name,category,go_type", SCALAR_EXPECTATIONS)
def test_scalar_table(name, category, go_type):
    t = TypeDescriptor(name, 0, name)
    assert classify(t) is category
    assert target_type(t) == go_type


@pytest.mark.parametrize("name,category,go_type", SCALAR_EXPECTATIONS)
def test_pointer_depth_composes(name, category, go_type):
    one = TypeDescriptor(name, 1, name + " *")
    assert resolve(one) == (category, 1)
    assert target_type(one) == "*" + go_type
    assert target_type(TypeDescriptor(name, 2, name + " **")) == "**" + go_type


@pytest.mark.parametrize("name", CALLBACK_NAMES)
def test_debug_callbacks_ignore_depth(name):
    for depth in (0, 1):
        t = TypeDescriptor(name, depth, name + " *" * depth)
        assert resolve(t) == (Category.OPAQUE_POINTER, 0)
        assert target_type(t) == "unsafe.Pointer"


def test_half_float_is_bit_pattern():
    assert target_type(TypeDescriptor("GLhalfNV", 0, "GLhalfNV")) == "uint16"


@pytest.mark.parametrize("name", ["void", "GLvoid"])
def test_void_pointers(name):
    bare = TypeDescriptor(name, 0, name)
    assert classify(bare) is Category.VOID
    assert is_void(bare)
    assert target_type(bare) == ""

    one = TypeDescriptor(name, 1, name + " *")
    assert not is_void(one)
    assert resolve(one) == (Category.ADDRESS, 0)
    assert target_type(one) == "uintptr"

    two = TypeDescriptor(name, 2, name + " **")
    assert resolve(two) == (Category.ADDRESS, 1)
    assert target_type(two) == "*uintptr"

    three = TypeDescriptor(name, 3, name + " ***")
    assert classify(three) is Category.UNMAPPED
    assert target_type(three) == f"***C.{name}"


def test_unmapped_falls_back_to_cgo_reference():
    t = TypeDescriptor("GLmystery", 1, "GLmystery *")
    assert classify(t) is Category.UNMAPPED
    assert not is_mapped(t)
    assert target_type(t) == "*C.GLmystery"
    assert t.c_type() == "GLmystery *"


def test_elaborated_names_use_cgo_spelling():
    t = TypeDescriptor("struct _cl_context", 1, "struct _cl_context *")
    assert cgo_reference(t) == "*C.struct__cl_context"
    assert target_type(t) == "*C.struct__cl_context"
    assert cgo_reference(TypeDescriptor("union  foo", 0, "union foo")) == "C.union_foo"


def test_known_names_are_mapped():
    names = known_type_names()
    assert "GLunknown" not in names
    for name in names:
        assert is_mapped(TypeDescriptor(name, 1, name))
