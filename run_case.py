"""
Run a field case defined by a YAML config file.
"""

import sys
import argparse
import logging
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from core.geometry import Vector3D
from core.io import CaseLoader, dump_entities, dump_field, dump_field_line
from core.logging_config import setup_logging
from postprocessing import trace_field_line
from solvers.superposition.entities import FieldKind

logger = logging.getLogger("core.run_case")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Compute static E/B fields of charge and current distributions")
    parser.add_argument("case_file", type=str, help="Path to YAML case file")
    parser.add_argument("--step", type=float, default=None, help="Override the integration step size")
    parser.add_argument("--output", type=str, default=None, help="Override the output directory")
    parser.add_argument("--validate", action="store_true", help="Only validate the case file")
    parser.add_argument("--log-level", type=str, default="INFO", help="Logging level (DEBUG, INFO, ...)")
    parser.add_argument("--log-file", type=str, default=None, help="Also write the log to this file")
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level.upper(), logging.INFO), args.log_file)

    case_path = Path(args.case_file).resolve()
    if not case_path.exists():
        logger.error("Case file not found: %s", case_path)
        return 1

    logger.info("Loading case: %s", case_path.name)
    try:
        if args.validate:
            CaseLoader.validate(case_path)
            logger.info("Case file is valid.")
            return 0
        solver, config = CaseLoader.load(case_path)
    except Exception as e:
        logger.error("Error loading case: %s", e)
        return 1

    logger.info("Case '%s' loaded: %s", config.name, solver)

    if args.step is not None and not solver.set_step_size(args.step):
        logger.warning("Continuing with step size %s", solver.step_size)

    output_dir = Path(args.output or config.output.directory)
    output_dir.mkdir(parents=True, exist_ok=True)

    if config.output.write_entities:
        entities_file = output_dir / config.output.entities_filename
        with open(entities_file, 'w') as out:
            count = dump_entities(out, solver)
        logger.info("Wrote %d entities to %s", count, entities_file)

    failures = 0

    for index, region in enumerate(config.field_regions):
        kind = FieldKind(region.field)
        region_file = output_dir / (region.filename or f"field_{index}_{kind.value}.dat")
        try:
            with open(region_file, 'w') as out:
                field = dump_field(
                    out,
                    solver,
                    kind,
                    Vector3D(*region.lower),
                    Vector3D(*region.upper),
                    region.spacing,
                    arrow_length=region.arrow_length,
                )
        except ArithmeticError as e:
            # a lattice point sits on a source sample
            logger.error("Field region %d skipped: %s", index, e)
            region_file.unlink(missing_ok=True)
            failures += 1
            continue
        logger.info("%r -> %s", field, region_file)

    for index, line in enumerate(config.field_lines):
        try:
            points = trace_field_line(
                solver,
                Vector3D(*line.start),
                line.length,
                delta=line.delta,
                kind=FieldKind(line.field),
            )
        except ArithmeticError as e:
            logger.error("Field line %d skipped: %s", index, e)
            failures += 1
            continue
        line_file = output_dir / (line.filename or f"fieldline_{index}.dat")
        with open(line_file, 'w') as out:
            dump_field_line(out, points)
        logger.info("Field line %d: %d points -> %s", index, len(points), line_file)

    if failures:
        logger.error("Done with %d failed outputs.", failures)
        return 1
    logger.info("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
