from pikaia.problems.benchmarks import paraboloid, rosenbrock, twod

__all__ = ["paraboloid", "rosenbrock", "twod"]
