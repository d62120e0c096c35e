from .generate import FluidDeclaration, default_theme, generate_fluid_value

__all__ = ["FluidDeclaration", "default_theme", "generate_fluid_value"]
