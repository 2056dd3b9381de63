"""Demo data generators."""

from bankomat.generators.demo import DemoCustomer, DemoDataGenerator, seed_repositories

__all__ = ["DemoCustomer", "DemoDataGenerator", "seed_repositories"]
