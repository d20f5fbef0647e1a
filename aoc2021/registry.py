"""
Solver registry for the Advent of Code 2021 runner.

This module maps day identifiers to the entry points of their solvers. Entry
points are resolved lazily, so listing the registry never imports a solver
module that is not used.
"""

import importlib
import logging
import time
from types import ModuleType
from typing import Any, Callable, Dict, List, Optional, Tuple

from .config import DEFAULT_PART

logger = logging.getLogger(__name__)


# Registry mapping day identifiers to their entry points
SOLVERS: Dict[str, str] = {
    f"day{day:02d}": f"aoc2021.days.day{day:02d}:solve" for day in range(1, 26)
}


def _split_entry_point(entry_point: str) -> Tuple[str, str]:
    module_path, function_name = entry_point.split(":")
    return module_path, function_name


def get_solver(solver_name: str) -> Callable:
    """
    Get a solver function by day identifier.

    Args:
        solver_name: Day identifier such as ``"day01"``

    Returns:
        Solver function taking the input text and a part number

    Raises:
        ValueError: If the day is not registered
        ImportError: If the solver module cannot be imported
    """
    if solver_name not in SOLVERS:
        available_solvers = list(SOLVERS.keys())
        raise ValueError(f"Unknown solver '{solver_name}'. Available solvers: {available_solvers}")

    module_path, function_name = _split_entry_point(SOLVERS[solver_name])

    try:
        module = importlib.import_module(module_path)
        return getattr(module, function_name)
    except ImportError as e:
        raise ImportError(f"Could not import solver '{solver_name}' from {module_path}: {e}")
    except AttributeError as e:
        raise ImportError(f"Function '{function_name}' not found in {module_path}: {e}")


def get_solver_module(solver_name: str) -> ModuleType:
    """Return the module that defines the solver registered as ``solver_name``."""
    return importlib.import_module(get_solver(solver_name).__module__)


def register_solver(name: str, entry_point: str) -> None:
    """
    Register a new solver.

    Args:
        name: Identifier to register the solver under
        entry_point: Module path and function name (e.g., "module.path:function_name")
    """
    SOLVERS[name] = entry_point


def list_solvers() -> List[str]:
    """Return list of registered day identifiers."""
    return list(SOLVERS.keys())


def solve_with_solver(text: str, solver_name: str, part: int = DEFAULT_PART) -> Any:
    """
    Solve one part of a day's puzzle.

    Args:
        text: Full puzzle input
        solver_name: Day identifier
        part: 1 or 2

    Returns:
        The answer, an ``int`` or a rendered ``str``
    """
    solver_func = get_solver(solver_name)
    start = time.perf_counter()
    answer = solver_func(text, part)
    logger.debug(f"{solver_name} part {part} solved in {time.perf_counter() - start:.3f}s")
    return answer


def get_solver_info(solver_name: str) -> Dict[str, Any]:
    """
    Get information about a solver.

    Args:
        solver_name: Day identifier

    Returns:
        Dictionary with solver information
    """
    if solver_name not in SOLVERS:
        return {"error": "Solver not found"}

    entry_point = SOLVERS[solver_name]
    module_path, function_name = _split_entry_point(entry_point)

    info: Dict[str, Any] = {
        "name": solver_name,
        "entry_point": entry_point,
        "module": module_path,
        "function": function_name,
    }

    module = get_solver_module(solver_name)
    info["title"] = getattr(module, "TITLE", solver_name)
    info["parts"] = sorted(getattr(module, "REPORT", {}).keys())
    if module.__doc__:
        info["description"] = module.__doc__.strip().splitlines()[0]
    return info


def validate_solver(solver_name: str) -> bool:
    """
    Validate that a solver can be loaded and describes itself.

    Args:
        solver_name: Day identifier

    Returns:
        True if the solver resolves and its module declares TITLE and REPORT
    """
    try:
        module = get_solver_module(solver_name)
    except (ValueError, ImportError):
        return False
    report = getattr(module, "REPORT", None)
    return isinstance(getattr(module, "TITLE", None), str) and bool(report)


def benchmark_solvers(inputs: Dict[str, str],
                      solver_names: Optional[List[str]] = None) -> Dict[str, Dict[str, Any]]:
    """
    Run several solvers on their inputs and time every part.

    Args:
        inputs: Day identifier to puzzle input text
        solver_names: Days to run (default: every day present in ``inputs``)

    Returns:
        Per day, a dictionary with ``answers``, ``elapsed`` seconds and
        ``errors`` keyed by part
    """
    if solver_names is None:
        solver_names = [name for name in list_solvers() if name in inputs]

    results: Dict[str, Dict[str, Any]] = {}
    for solver_name in solver_names:
        parts = get_solver_info(solver_name).get("parts", [])
        day_results: Dict[str, Any] = {"answers": {}, "elapsed": {}, "errors": {}}
        for part in parts:
            start = time.perf_counter()
            try:
                day_results["answers"][part] = solve_with_solver(inputs[solver_name], solver_name, part)
            except ValueError as e:
                day_results["errors"][part] = str(e)
                logger.warning(f"{solver_name} part {part} failed: {e}")
            day_results["elapsed"][part] = time.perf_counter() - start
        results[solver_name] = day_results

    return results
