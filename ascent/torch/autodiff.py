"""Build NumPy gradient and Hessian callables from a torch objective.

The solvers in :mod:`ascent.optimize` take plain NumPy callables. These
helpers let an objective be written once with torch operations and have its
derivatives supplied by autograd, all in float64 on the CPU.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
import torch

TorchObjective = Callable[[torch.Tensor], torch.Tensor]


def _as_tensor(x: np.ndarray, requires_grad: bool = False) -> torch.Tensor:
    t = torch.as_tensor(np.asarray(x, dtype=float), dtype=torch.float64).clone()
    return t.requires_grad_(requires_grad)


def torch_objective(fn: TorchObjective) -> Callable[[np.ndarray], float]:
    """Wrap ``fn`` so it accepts and returns NumPy/Python values."""

    def fun(x: np.ndarray) -> float:
        with torch.no_grad():
            return float(fn(_as_tensor(x)))

    return fun


def torch_gradient(fn: TorchObjective) -> Callable[[np.ndarray], np.ndarray]:
    """
    Return a callable computing the gradient of ``fn`` by reverse-mode autograd.

    Raises
    ------
    ValueError
        At call time, if ``fn`` does not return a scalar.
    """

    def grad(x: np.ndarray) -> np.ndarray:
        t = _as_tensor(x, requires_grad=True)
        value = fn(t)
        if value.numel() != 1:
            raise ValueError("Objective must return a scalar tensor.")
        (g,) = torch.autograd.grad(value.reshape(()), t)
        return g.detach().cpu().numpy()

    return grad


def torch_hessian(fn: TorchObjective) -> Callable[[np.ndarray], np.ndarray]:
    """Return a callable computing the Hessian of ``fn`` as a (k, k) array."""

    def hess(x: np.ndarray) -> np.ndarray:
        t = _as_tensor(x)
        h = torch.autograd.functional.hessian(lambda v: fn(v).reshape(()), t)
        k = t.numel()
        return h.detach().cpu().numpy().reshape(k, k)

    return hess


__all__ = ["TorchObjective", "torch_objective", "torch_gradient", "torch_hessian"]
