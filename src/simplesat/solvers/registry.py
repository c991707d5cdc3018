"""
Name-based lookup of the search controllers.

A solver class becomes reachable from ``solve()``, the configuration key
``solver.name`` and the ``--solver`` flag once it is decorated with
``@register_solver("<name>")``.
"""

import logging
from collections.abc import Callable

from .base import SolverBase

# Set up logging
logger = logging.getLogger(__name__)


class SolverRegistry:
    """
    Maps solver names to ``SolverBase`` subclasses.
    """

    _registry: dict[str, type[SolverBase]] = {}

    @classmethod
    def register(cls, name: str, solver_cls: type[SolverBase]) -> None:
        """
        Register ``solver_cls`` under ``name`` and record the name on the class.

        Raises:
            TypeError: If ``solver_cls`` does not inherit from SolverBase
        """
        if not (isinstance(solver_cls, type) and issubclass(solver_cls, SolverBase)):
            raise TypeError(f"Cannot register {solver_cls!r} as '{name}': not a SolverBase")

        existing = cls._registry.get(name)
        if existing is not None and existing is not solver_cls:
            logger.warning(
                f"Solver name '{name}' moves from {existing.__name__} to {solver_cls.__name__}"
            )

        solver_cls.solver_name = name
        cls._registry[name] = solver_cls

    @classmethod
    def register_as(cls, name: str) -> Callable[[type[SolverBase]], type[SolverBase]]:
        """Class decorator form of ``register``."""

        def decorator(solver_cls: type[SolverBase]) -> type[SolverBase]:
            cls.register(name, solver_cls)
            return solver_cls

        return decorator

    @classmethod
    def get(cls, name: str) -> type[SolverBase]:
        """
        Look up a solver class.

        Raises:
            ValueError: If no solver is registered under ``name``
        """
        try:
            return cls._registry[name]
        except KeyError:
            raise ValueError(
                f"No solver registered with name '{name}', "
                f"available: {', '.join(cls.list_solvers())}"
            ) from None

    @classmethod
    def list_solvers(cls) -> list[str]:
        """Registered solver names in registration order."""
        return list(cls._registry)

    @classmethod
    def create(cls, name: str, num_vars: int = 0, **options) -> SolverBase:
        """
        Instantiate the solver registered under ``name``.

        Args:
            name: Registered solver name
            num_vars: Number of variables of the problem
            **options: Solver options passed to the constructor

        Returns:
            A fresh solver with no clauses
        """
        return cls.get(name)(num_vars=num_vars, **options)


register_solver = SolverRegistry.register_as
