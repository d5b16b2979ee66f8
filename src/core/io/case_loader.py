"""
YAML case file loader with validation.
"""

import logging
from pathlib import Path
import yaml

from ..config.schemas import EntityType, SimulationConfig
from .shape_parser import parse_manifold
from solvers.superposition.solver import SuperpositionSolver

logger = logging.getLogger(__name__)


class CaseLoader:
    """Load and validate field cases from YAML files."""

    @staticmethod
    def load(filepath: str | Path) -> tuple[SuperpositionSolver, SimulationConfig]:
        """
        Load case file and populate a solver.

        Args:
            filepath: Path to YAML case file

        Returns:
            Tuple of (solver with every entity registered, validated config)
        """
        filepath = Path(filepath)

        if not filepath.exists():
            raise FileNotFoundError(f"Case file not found: {filepath}")

        # Load YAML
        with open(filepath, 'r') as f:
            raw_config = yaml.safe_load(f)

        # Validate with Pydantic
        config = SimulationConfig(**raw_config)
        logger.info("Loaded case '%s' from %s", config.name, filepath)

        solver = CaseLoader.build_solver(config)

        return solver, config

    @staticmethod
    def build_solver(config: SimulationConfig) -> SuperpositionSolver:
        """
        Build a solver from a validated config.

        Args:
            config: Validated simulation config

        Returns:
            Solver with one entity per config entry, in file order
        """
        solver = SuperpositionSolver(step_size=config.step_size)

        for entity_config in config.entities:
            manifold = parse_manifold(entity_config.shape)

            if entity_config.kind is EntityType.CHARGE:
                entity_id = solver.add_charge(entity_config.magnitude, manifold)
            else:
                entity_id = solver.add_current(entity_config.magnitude, manifold)

            logger.info(
                "Entity %d: %s %s on %s",
                entity_id,
                entity_config.name or entity_config.kind.value,
                entity_config.magnitude,
                manifold.name,
            )

        return solver

    @staticmethod
    def validate(filepath: str | Path) -> bool:
        """
        Validate case file without building the solver.

        Args:
            filepath: Path to YAML case file

        Returns:
            True if valid, raises ValidationError otherwise
        """
        filepath = Path(filepath)

        with open(filepath, 'r') as f:
            raw_config = yaml.safe_load(f)

        # This will raise ValidationError if invalid
        SimulationConfig(**raw_config)

        return True
