"""Numerical integrators for galaxy interaction."""

from galaxy_interaction.physics.integrators.base import Integrator
from galaxy_interaction.physics.integrators.semi_implicit_euler import (
    SemiImplicitEulerIntegrator,
    integrate,
)

__all__ = ["Integrator", "SemiImplicitEulerIntegrator", "integrate", "get_integrator"]


def get_integrator(name: str, **kwargs) -> Integrator:
    """Get integrator instance by name.
    
    Raises:
        ValueError: If the name is unknown
    """
    integrators = {
        'semi_implicit_euler': SemiImplicitEulerIntegrator,
    }
    integrator_class = integrators.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list(integrators.keys())}")
    return integrator_class(**kwargs)
