"""
Render jobs for PySineNoise.

A RenderJob pairs a field with a colour policy, a resolution and an output
name. Running a job samples and normalizes the field, colours the grid and
writes the PNG. Jobs are independent: by default a failed write is recorded in
its RenderResult and the remaining jobs still run.

Author: B.G.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .. import constants as cte
from ..field import Field, fractal_field, scale, sine_field
from ..grid import normalize_grid, sample_field
from ..render import RenderError, render_grid


@dataclass(frozen=True)
class RenderJob:
    output: str
    field: Field
    colormap: str = "grayscale"
    width: int = cte.DEFAULT_SIZE
    height: int = cte.DEFAULT_SIZE


@dataclass(frozen=True)
class RenderResult:
    output: str
    ok: bool
    error: Optional[str] = None
    vmin: Optional[float] = None
    vmax: Optional[float] = None


def run_job(job: RenderJob, output_dir=".", verbose: bool = False,
            backend: str = "numpy") -> RenderResult:
    """
    Run one job end to end.

    Args:
        job: Job to run
        output_dir: Directory the job's output name is resolved against
        verbose: Print the sampled range
        backend: Sampling backend ("numpy" or "taichi")

    Returns:
        RenderResult: successful result with the pre-normalization range

    Raises:
        RenderError: if the image cannot be written
    """
    path = os.path.join(str(output_dir), job.output)
    samples = sample_field(job.field, job.width, job.height, backend=backend)
    grid, vmin, vmax = normalize_grid(samples, verbose=verbose)
    render_grid(grid, job.colormap, path)
    if verbose:
        print(f"Wrote '{path}' ({job.width}x{job.height}, {job.colormap})")
    return RenderResult(path, True, None, vmin, vmax)


def run_jobs(jobs, output_dir=".", fail_fast: bool = False, verbose: bool = False,
             backend: str = "numpy") -> List[RenderResult]:
    """
    Run jobs in order.

    Args:
        jobs: Iterable of RenderJob
        output_dir: Directory for all outputs
        fail_fast: Re-raise the first RenderError instead of continuing
        verbose: Print per-run diagnostics
        backend: Sampling backend

    Returns:
        list[RenderResult]: one result per job, failed runs have ok=False
    """
    results = []
    for job in jobs:
        try:
            results.append(run_job(job, output_dir, verbose=verbose, backend=backend))
        except RenderError as e:
            if fail_fast:
                raise
            if verbose:
                print(f"Error: {e}")
            results.append(RenderResult(e.output, False, str(e)))
    return results


def reference_jobs(size: int = cte.DEFAULT_SIZE, octaves: int = cte.DEFAULT_OCTAVES,
                   fall_off: float = cte.DEFAULT_FALL_OFF, seed=None) -> List[RenderJob]:
    """
    Build the reference runs.

    test.png is a single grayscale sine ridge pattern at ten times the base
    frequency. terraina/b/c.png are terracolor fractal terrains with the same
    parameters; each draws its own octaves from one shared generator so the
    three are similar in character but distinct.

    Args:
        size: Width and height of every image
        octaves: Octave count of the fractal terrains
        fall_off: Per-octave fall-off of the fractal terrains
        seed: Seed of the shared generator (None for fresh randomness)

    Returns:
        list[RenderJob]
    """
    rng = np.random.default_rng(seed)
    jobs = [RenderJob(cte.SINE_OUTPUT, scale(sine_field(0.0, 0.0), cte.SINE_SCALE),
                      "grayscale", size, size)]
    for name in cte.TERRAIN_OUTPUTS:
        terrain = scale(fractal_field(octaves, fall_off, rng=rng), cte.TERRAIN_SCALE)
        jobs.append(RenderJob(name, terrain, "terracolor", size, size))
    return jobs
