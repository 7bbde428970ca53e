#!/usr/bin/env python3
"""
Basic usage example for declgen.

This example builds a small data class, an enum and a class with a
companion object, and prints the generated Kotlin source.
"""

from declgen import (
    ClassName,
    ConfigurationError,
    FunSpec,
    KModifier,
    PropertySpec,
    TypeSpec,
    DOUBLE,
    INT,
    STRING,
)


def build_point() -> TypeSpec:
    """A data class whose properties fold into the primary constructor."""
    return (
        TypeSpec.class_builder("Point")
        .add_modifiers(KModifier.DATA)
        .primary_constructor(
            FunSpec.constructor_builder()
            .add_parameter("x", INT)
            .add_parameter("y", INT)
            .build()
        )
        .add_property(PropertySpec.builder("x", INT).initializer("%N", "x").build())
        .add_property(PropertySpec.builder("y", INT).initializer("%N", "y").build())
        .build()
    )


def build_planet() -> TypeSpec:
    """An enum whose constants pass constructor arguments."""
    builder = (
        TypeSpec.enum_builder("Planet")
        .primary_constructor(FunSpec.constructor_builder().add_parameter("mass", DOUBLE).build())
        .add_property(PropertySpec.builder("mass", DOUBLE).initializer("%N", "mass").build())
    )
    for name, mass in (("MERCURY", "3.303e+23"), ("EARTH", "5.976e+24")):
        builder.add_enum_constant(name, TypeSpec.anonymous_class_builder("%L", mass).build())
    return builder.build()


def build_greeter() -> TypeSpec:
    """A class with a function and a companion object factory."""
    greeter = ClassName("com.example", "Greeter")
    companion = (
        TypeSpec.companion_object_builder()
        .add_function(
            FunSpec.builder("create")
            .returns(greeter)
            .add_statement("return %T(%S)", greeter, "Hello")
            .build()
        )
        .build()
    )
    return (
        TypeSpec.class_builder(greeter)
        .primary_constructor(FunSpec.constructor_builder().add_parameter("greeting", STRING).build())
        .add_property(
            PropertySpec.builder("greeting", STRING, KModifier.PRIVATE).initializer("%N", "greeting").build()
        )
        .add_function(
            FunSpec.builder("greet")
            .add_parameter("name", STRING)
            .add_statement("println(greeting + %S + name)", ", ")
            .build()
        )
        .companion_object(companion)
        .build()
    )


def main():
    """Demonstrate basic declgen usage."""
    print("declgen - Basic Usage Example")
    print("=" * 60)

    for spec in (build_point(), build_planet(), build_greeter()):
        print(spec)

    # Illegal facets are rejected as soon as they are added
    print("Adding a superclass to an interface...")
    try:
        TypeSpec.interface_builder("Shape").superclass(ClassName("com.example", "Base"))
    except ConfigurationError as e:
        print(f"✓ Rejected: {e}")


if __name__ == "__main__":
    main()
