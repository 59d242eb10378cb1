import copy
import inspect
import numpy as np
from typing import Any, Callable, List, Union
from .specs import Algorithm as AlgorithmEnum
from .sampler import SAMPLER_REGISTRY
from . import algorithms


class Algorithm:
    """Pairs a graph algorithm with its input sampler and a seeded rng."""

    def __init__(self, name: Union[str, AlgorithmEnum], seed: int = 42, **sampler_kwargs):
        self._name = AlgorithmEnum(name)
        self._runner: Callable = None
        self._seed = seed

        self._rng = np.random.RandomState(seed)
        self._sampler = SAMPLER_REGISTRY[self.name]
        self._sampler_kwargs = self.clean_sampler_kwargs(sampler_kwargs)

    @property
    def name(self) -> AlgorithmEnum:
        return self._name

    def reset(self):
        self._rng = np.random.RandomState(self._seed)

    def clean_sampler_kwargs(self, sampler_overrides: dict) -> dict:
        """Keeps only the overrides the sampler actually accepts."""
        sampler_args = inspect.signature(self._sampler).parameters
        default_kwargs = copy.deepcopy(self.default_sampler_kwargs)
        default_kwargs.update({k: v for k, v in sampler_overrides.items() if v is not None})
        return {k: default_kwargs[k] for k in default_kwargs if k in sampler_args}

    @property
    def default_sampler_kwargs(self) -> dict:
        p = [0.1 + 0.1 * i for i in range(9)]
        if self.name in [AlgorithmEnum.mst_kruskal,
                         AlgorithmEnum.mst_prim,
                         AlgorithmEnum.a_star]:
            p = [prob / 2 for prob in p]
        return {
            'length': 16,
            'p': p,
        }

    @property
    def runner(self) -> Callable:
        if self._runner is None:
            self._runner = getattr(algorithms, self.name.value)
        return self._runner

    def sample(self) -> List[Any]:
        """Draws one set of positional arguments for the runner."""
        return self._sampler(self._rng, **self._sampler_kwargs)

    def run(self, *args) -> Any:
        return self.runner(*args)

    def __repr__(self) -> str:
        return f"Algorithm(name={self.name.value}, seed={self._seed}, sampler_kwargs={self._sampler_kwargs})"
