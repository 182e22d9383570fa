"""Symbol table: types, constant values, scopes and declared objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Optional


class TypeClass(Enum):
    """Class of a KPL type."""

    INT = auto()
    CHAR = auto()
    ARRAY = auto()


class ObjectKind(Enum):
    """Kind of a declared object."""

    CONSTANT = auto()
    VARIABLE = auto()
    TYPE = auto()
    FUNCTION = auto()
    PROCEDURE = auto()
    PARAMETER = auto()
    PROGRAM = auto()


class ParamKind(Enum):
    """How a parameter is passed."""

    VALUE = auto()
    REFERENCE = auto()


@dataclass
class Type:
    """A KPL type; arrays carry a size and an element type."""

    type_class: TypeClass
    array_size: int = 0
    element_type: Optional["Type"] = None


@dataclass
class ConstantValue:
    """An integer or character constant."""

    type_class: TypeClass
    int_value: int = 0
    char_value: str = ""


@dataclass(eq=False)
class Scope:
    """Objects declared in one block, its owner and the enclosing scope."""

    owner: Optional["Symbol"] = None
    outer: Optional["Scope"] = None
    objects: list["Symbol"] = field(default_factory=list)


@dataclass(eq=False)
class Symbol:
    """A declared object; which attributes are used depends on ``kind``.

    ``value`` belongs to constants, ``actual_type`` to type declarations,
    ``type`` to variables and parameters, ``return_type`` to functions,
    ``param_list`` to functions and procedures, ``param_kind`` and ``owner``
    to parameters. ``scope`` is the block a variable lives in, or the block
    a function, procedure or program opens.
    """

    name: str
    kind: ObjectKind
    value: Optional[ConstantValue] = None
    actual_type: Optional[Type] = None
    type: Optional[Type] = None
    return_type: Optional[Type] = None
    scope: Optional[Scope] = None
    param_list: list["Symbol"] = field(default_factory=list)
    param_kind: Optional[ParamKind] = None
    owner: Optional["Symbol"] = None


def make_int_type() -> Type:
    """Return a new integer type."""
    return Type(TypeClass.INT)


def make_char_type() -> Type:
    """Return a new character type."""
    return Type(TypeClass.CHAR)


def make_array_type(array_size: int, element_type: Type) -> Type:
    """Return a new array type of ``array_size`` elements."""
    return Type(TypeClass.ARRAY, array_size, element_type)


def duplicate_type(type_: Type) -> Type:
    """Return a deep copy of ``type_``."""
    if type_.type_class is TypeClass.ARRAY:
        return Type(TypeClass.ARRAY, type_.array_size, duplicate_type(type_.element_type))
    return Type(type_.type_class)


def compare_type(type1: Type, type2: Type) -> bool:
    """Return whether two types are structurally the same."""
    if type1.type_class is not type2.type_class:
        return False
    if type1.type_class is TypeClass.ARRAY:
        if type1.array_size != type2.array_size:
            return False
        return compare_type(type1.element_type, type2.element_type)
    return True


def make_int_constant(i: int) -> ConstantValue:
    """Return an integer constant."""
    return ConstantValue(TypeClass.INT, int_value=i)


def make_char_constant(ch: str) -> ConstantValue:
    """Return a character constant."""
    return ConstantValue(TypeClass.CHAR, char_value=ch)


def duplicate_constant_value(value: ConstantValue) -> ConstantValue:
    """Return a copy of ``value``."""
    if value.type_class is TypeClass.INT:
        return make_int_constant(value.int_value)
    return ConstantValue(value.type_class, char_value=value.char_value)


def create_constant_object(name: str) -> Symbol:
    """Return a new constant object with no value yet."""
    return Symbol(name, ObjectKind.CONSTANT)


def create_type_object(name: str) -> Symbol:
    """Return a new type object with no actual type yet."""
    return Symbol(name, ObjectKind.TYPE)


def create_parameter_object(name: str, kind: ParamKind, owner: Symbol) -> Symbol:
    """Return a new parameter of ``owner`` passed as ``kind``."""
    return Symbol(name, ObjectKind.PARAMETER, param_kind=kind, owner=owner)


def find_object(objects: Iterable[Symbol], name: str) -> Optional[Symbol]:
    """Return the first object called ``name``, or ``None``."""
    return next((obj for obj in objects if obj.name == name), None)


class SymbolTable:
    """The program, the current scope and the predefined subroutines."""

    def __init__(self) -> None:
        self.program: Optional[Symbol] = None
        self.current_scope: Optional[Scope] = None
        self.global_objects: list[Symbol] = []

        readc = self.create_function_object("READC")
        readc.return_type = make_char_type()
        self.global_objects.append(readc)

        readi = self.create_function_object("READI")
        readi.return_type = make_int_type()
        self.global_objects.append(readi)

        writei = self.create_procedure_object("WRITEI")
        param = create_parameter_object("i", ParamKind.VALUE, writei)
        param.type = make_int_type()
        writei.param_list.append(param)
        self.global_objects.append(writei)

        writec = self.create_procedure_object("WRITEC")
        param = create_parameter_object("ch", ParamKind.VALUE, writec)
        param.type = make_char_type()
        writec.param_list.append(param)
        self.global_objects.append(writec)

        self.global_objects.append(self.create_procedure_object("WRITELN"))

        self.int_type = make_int_type()
        self.char_type = make_char_type()

    def create_program_object(self, name: str) -> Symbol:
        """Create the program object, with its own outermost scope."""
        program = Symbol(name, ObjectKind.PROGRAM)
        program.scope = Scope(program, None)
        self.program = program
        return program

    def create_variable_object(self, name: str) -> Symbol:
        """Create a variable belonging to the current scope."""
        return Symbol(name, ObjectKind.VARIABLE, scope=self.current_scope)

    def create_function_object(self, name: str) -> Symbol:
        """Create a function whose scope nests in the current scope."""
        obj = Symbol(name, ObjectKind.FUNCTION)
        obj.scope = Scope(obj, self.current_scope)
        return obj

    def create_procedure_object(self, name: str) -> Symbol:
        """Create a procedure whose scope nests in the current scope."""
        obj = Symbol(name, ObjectKind.PROCEDURE)
        obj.scope = Scope(obj, self.current_scope)
        return obj

    def enter_block(self, scope: Scope) -> None:
        """Make ``scope`` the current scope."""
        self.current_scope = scope

    def exit_block(self) -> None:
        """Return to the scope enclosing the current one."""
        if self.current_scope is None:
            raise RuntimeError("no block is open")
        self.current_scope = self.current_scope.outer

    def lookup_object(self, name: str) -> Optional[Symbol]:
        """Find ``name`` in the scope chain, then among the predefined objects."""
        scope = self.current_scope
        while scope is not None:
            obj = find_object(scope.objects, name)
            if obj is not None:
                return obj
            scope = scope.outer
        return find_object(self.global_objects, name)

    def declare_object(self, obj: Symbol) -> None:
        """Add ``obj`` to the current scope; parameters also join their owner's list."""
        if self.current_scope is None:
            raise RuntimeError("no block is open")
        if obj.kind is ObjectKind.PARAMETER:
            owner = self.current_scope.owner
            if owner is not None and owner.kind in (
                ObjectKind.FUNCTION,
                ObjectKind.PROCEDURE,
            ):
                owner.param_list.append(obj)
        self.current_scope.objects.append(obj)