"""
Core domain models, numerical kernels, and contracts.

core.math   — float-level kernels (conversion, arithmetic, transcendental)
core.domain — immutable value types (Angle, RectangularForm, PolarForm)
"""
