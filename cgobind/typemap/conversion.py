from typing import NamedTuple

from cgobind import logging as cgobind_logging

from .classifier import Category, cgo_reference, resolve, target_type
from .type_descriptor import TypeDescriptor

logger = cgobind_logging.get_logger(__name__)

# Helper the generated package defines to turn a Go bool into GL_TRUE/GL_FALSE.
BOOL_TO_INT_FUNC = "boolToInt"
NATIVE_TRUE = "TRUE"


class Conversion(NamedTuple):
    expression: str
    # False when the native type is unknown and the cast is a guess.
    verified: bool = True


def _check_convertible(descriptor: TypeDescriptor, category: Category) -> None:
    if category is Category.VOID:
        raise ValueError(f"Cannot convert a value of type void: {descriptor}")


def _finish(descriptor: TypeDescriptor, category: Category, expression: str) -> Conversion:
    if category is Category.UNMAPPED:
        logger.debug(
            "No Go mapping for %s; emitting unverified cast",
            descriptor,
            extra={
                "native_type": descriptor.name,
                "pointer_depth": descriptor.pointer_depth,
                "raw_declaration": descriptor.raw_declaration,
            },
        )
        return Conversion(expression, verified=False)
    return Conversion(expression)


def native_conversion(descriptor: TypeDescriptor, name: str) -> Conversion:
    """Build the expression converting Go variable ``name`` to the C type."""
    category, _ = resolve(descriptor)
    _check_convertible(descriptor, category)

    if descriptor.is_void_pointer() and category is Category.ADDRESS:
        if descriptor.pointer_depth == 1:
            expression = f"unsafe.Pointer({name})"
        else:
            expression = f"(*unsafe.Pointer)(unsafe.Pointer({name}))"
    elif category is Category.BOOL and descriptor.pointer_depth == 0:
        expression = f"(C.{descriptor.name})({BOOL_TO_INT_FUNC}({name}))"
    elif descriptor.pointer_depth >= 1:
        expression = f"({cgo_reference(descriptor)})(unsafe.Pointer({name}))"
    else:
        expression = f"({cgo_reference(descriptor)})({name})"

    return _finish(descriptor, category, expression)


def target_conversion(descriptor: TypeDescriptor, name: str) -> Conversion:
    """Build the expression converting C variable ``name`` to the Go type."""
    category, _ = resolve(descriptor)
    _check_convertible(descriptor, category)

    if descriptor.is_void_pointer() and category is Category.ADDRESS:
        if descriptor.pointer_depth == 1:
            expression = f"uintptr({name})"
        else:
            expression = f"(*uintptr)(unsafe.Pointer({name}))"
    elif category is Category.BOOL and descriptor.pointer_depth == 0:
        expression = f"{name} == {NATIVE_TRUE}"
    elif category is Category.UNMAPPED:
        expression = f"({target_type(descriptor)})({name})"
    elif descriptor.pointer_depth >= 1:
        expression = f"({target_type(descriptor)})(unsafe.Pointer({name}))"
    else:
        expression = f"({target_type(descriptor)})({name})"

    return _finish(descriptor, category, expression)


def to_native(descriptor: TypeDescriptor, name: str) -> str:
    return native_conversion(descriptor, name).expression


def to_target(descriptor: TypeDescriptor, name: str) -> str:
    return target_conversion(descriptor, name).expression
