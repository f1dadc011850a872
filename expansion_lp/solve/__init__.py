from .solver import SolveOutcome, solve_model, solver_available, STATUS_OPTIMAL

__all__ = ["SolveOutcome", "solve_model", "solver_available", "STATUS_OPTIMAL"]
