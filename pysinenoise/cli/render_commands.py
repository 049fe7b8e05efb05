"""
Reference render CLI command for PySineNoise.

Runs the reference set of images: a grayscale sine test pattern and three
fractal terrains. With no options it reproduces the original hardcoded runs
in the current directory.

Author: B.G.
"""

import os
import sys

import click

import pysinenoise as psn
from pysinenoise import constants as cte


def _init_backend(backend):
    if backend == "taichi":
        import taichi as ti
        ti.init(arch=ti.gpu)


@click.command()
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Directory to write the images to",
)
@click.option("--size", default=cte.DEFAULT_SIZE, show_default=True, type=click.IntRange(min=1),
              help="Width and height of every image in pixels")
@click.option("--octaves", default=cte.DEFAULT_OCTAVES, show_default=True, type=click.IntRange(min=0),
              help="Number of sine octaves in the fractal terrains")
@click.option("--fall-off", default=cte.DEFAULT_FALL_OFF, show_default=True, type=float,
              help="Per-octave fall-off ratio of the fractal terrains")
@click.option("--seed", default=None, type=int, help="Random seed (default: fresh randomness)")
@click.option(
    "--backend",
    type=click.Choice(list(cte.BACKENDS)),
    default="numpy",
    show_default=True,
    help="Sampling backend",
)
@click.option("--fail-fast", is_flag=True, default=False, help="Stop at the first failed image")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def render_reference(output_dir, size, octaves, fall_off, seed, backend, fail_fast, verbose):
    """
    Render the reference noise images.

    Writes test.png (grayscale sine ridges) and terraina.png, terrainb.png,
    terrainc.png (fractal terrains in the terrain palette).

    Examples:

        # Reference runs in the current directory
        psn-render

        # Reproducible terrains in ./out
        psn-render -o out --seed 42 -v
    """
    try:
        _init_backend(backend)
        if output_dir != ".":
            os.makedirs(output_dir, exist_ok=True)

        jobs = psn.driver.reference_jobs(size=size, octaves=octaves, fall_off=fall_off, seed=seed)
        results = psn.driver.run_jobs(jobs, output_dir, fail_fast=fail_fast,
                                      verbose=verbose, backend=backend)

        failed = [r for r in results if not r.ok]
        for r in results:
            if r.ok:
                click.echo(f"Rendered '{r.output}'")
            else:
                click.echo(f"Error: {r.error}", err=True)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    render_reference()
