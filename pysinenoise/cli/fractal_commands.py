"""
Fractal terrain CLI command for PySineNoise.

Renders a single summed-sine terrain. The field can be saved as JSON and
loaded back later to re-render the exact same terrain at another size or with
the other colour policy.

Author: B.G.
"""

import json
import sys

import click
from click.core import ParameterSource

import pysinenoise as psn
from pysinenoise import constants as cte

# Options that only shape a newly generated field
_GENERATION_OPTIONS = {
    "octaves": "--octaves",
    "fall_off": "--fall-off",
    "scale_factor": "--scale",
    "seed": "--seed",
}


def _check_load_field_options(ctx):
    """Reject generation options given together with --load-field."""
    given = [flag for name, flag in _GENERATION_OPTIONS.items()
             if ctx.get_parameter_source(name)
             not in (ParameterSource.DEFAULT, ParameterSource.DEFAULT_MAP)]
    if given:
        raise click.UsageError(
            f"--load-field cannot be combined with {', '.join(given)}: "
            "a loaded field is rendered as saved", ctx=ctx)


@click.command()
@click.argument("output", type=click.Path(dir_okay=False))
@click.option("--size", default=cte.DEFAULT_SIZE, show_default=True, type=click.IntRange(min=1),
              help="Width and height of the image in pixels")
@click.option("--octaves", default=cte.DEFAULT_OCTAVES, show_default=True, type=click.IntRange(min=0),
              help="Number of sine octaves")
@click.option("--fall-off", default=cte.DEFAULT_FALL_OFF, show_default=True, type=float,
              help="Per-octave fall-off ratio")
@click.option("--scale", "scale_factor", default=cte.TERRAIN_SCALE, show_default=True, type=float,
              help="Scale factor applied to the whole field")
@click.option(
    "--colormap",
    type=click.Choice(list(psn.colormap.COLORMAPS)),
    default="terracolor",
    show_default=True,
    help="Colour policy",
)
@click.option("--seed", default=None, type=int, help="Random seed (default: fresh randomness)")
@click.option("--save-field", type=click.Path(dir_okay=False), default=None,
              help="Write the generated field to this JSON file")
@click.option("--load-field", type=click.Path(exists=True, dir_okay=False), default=None,
              help="Render a field previously saved with --save-field "
                   "(not combinable with --octaves/--fall-off/--scale/--seed)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def fractal(ctx, output, size, octaves, fall_off, scale_factor, colormap, seed, save_field,
            load_field, verbose):
    """
    Render one fractal sine terrain to OUTPUT (PNG).

    Examples:

        # Terrain with a fixed seed
        psn-fractal terrain.png --seed 7

        # Keep the field, then re-render it in grayscale at 512 px
        psn-fractal a.png --seed 7 --save-field a.json
        psn-fractal a_gray.png --load-field a.json --colormap grayscale --size 512
    """
    if load_field is not None:
        _check_load_field_options(ctx)

    try:
        if load_field is not None:
            if verbose:
                click.echo(f"Loading field from '{load_field}'...")
            with open(load_field, "r", encoding="utf-8") as fh:
                field = psn.field.field_from_dict(json.load(fh))
        else:
            if verbose:
                click.echo(f"Building field: octaves={octaves}, fall_off={fall_off}, scale={scale_factor}")
            field = psn.field.scale(psn.field.fractal_field(octaves, fall_off, seed=seed), scale_factor)

        if save_field is not None:
            with open(save_field, "w", encoding="utf-8") as fh:
                json.dump(field.to_dict(), fh)
            if verbose:
                click.echo(f"Saved field to '{save_field}'")

        job = psn.driver.RenderJob(output, field, colormap, size, size)
        result = psn.driver.run_job(job, verbose=verbose)
        click.echo(f"Rendered '{result.output}'")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    fractal()
