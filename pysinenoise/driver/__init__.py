"""
Composition driver for PySineNoise.

Builds fields, runs them through sampling, colouring and the PNG sink, one
independent run per output image.

Usage:
    import pysinenoise as psn

    results = psn.driver.run_jobs(psn.driver.reference_jobs(seed=1), "out")
    failed = [r for r in results if not r.ok]

Author: B.G.
"""

from .runs import RenderJob, RenderResult, run_job, run_jobs, reference_jobs

__all__ = ["RenderJob", "RenderResult", "run_job", "run_jobs", "reference_jobs"]
