"""PyTorch autograd bridge for the NumPy solvers."""

from .autodiff import TorchObjective, torch_gradient, torch_hessian, torch_objective

__all__ = ["TorchObjective", "torch_objective", "torch_gradient", "torch_hessian"]
