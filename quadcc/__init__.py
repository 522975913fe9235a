"""Value types, parameter lists, quadruple IR and pseudo-assembly output for a small compiler."""

__version__ = "0.1.0"
__all__ = ["valuetypes", "parameter", "quadruple", "quad_to_asm"]