from api.routes.problem import ProblemController

__all__ = ["ProblemController"]
