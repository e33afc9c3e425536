"""
Flow texture CLI commands for PyFlowTex.

Command line front-end replacing an interactive parameter panel: every
generation parameter is an option (or a key of a JSON config file), the
texture is generated in one call and written as PNG.

Author: B.G.
"""

import json
import sys

import click
import taichi as ti
from click.core import ParameterSource

import pyflowtex as pft
from pyflowtex import constants as cte

# CLI option name -> GenerationParameters field
_PARAM_OPTIONS = {
    "width": "width",
    "height": "height",
    "octaves": "octaves",
    "scale_x": "scale_x",
    "scale_y": "scale_y",
    "offset_x": "offset_x",
    "offset_y": "offset_y",
    "lacunarity": "lacunarity",
    "gain": "gain",
    "blur": "apply_blur",
    "blur_angle": "blur_angle_degrees",
    "blur_strength": "blur_strength",
    "seed": "seed",
}

_ARCHS = {"cpu": ti.cpu, "gpu": ti.gpu}


def _init_taichi(arch, verbose):
    if verbose:
        click.echo(f"Initializing Taichi ({arch})...")
    ti.init(arch=_ARCHS[arch], offline_cache=False)


def _load_config(path):
    """Read a JSON object of GenerationParameters fields."""
    with open(path, encoding="utf-8") as fh:
        values = json.load(fh)
    if not isinstance(values, dict):
        raise pft.ParameterValidationError(f"Config file '{path}' must contain a JSON object")
    return values


def build_parameters(ctx, options, config=None):
    """
    Assemble GenerationParameters from a config file and command line options.

    Config values override defaults, options given explicitly on the command
    line override config values.
    """
    values = dict(_load_config(config)) if config else {}
    for option, field_name in _PARAM_OPTIONS.items():
        explicit = ctx.get_parameter_source(option) is ParameterSource.COMMANDLINE
        if explicit or field_name not in values:
            values[field_name] = options[option]
    return pft.GenerationParameters.from_dict(values)


@click.command()
@click.argument("output", type=click.Path(dir_okay=False))
@click.option("--width", "-W", default=cte.WIDTH, show_default=True, type=int, help="Texture width in pixels")
@click.option("--height", "-H", default=cte.HEIGHT, show_default=True, type=int, help="Texture height in pixels")
@click.option("--octaves", default=cte.OCTAVES, show_default=True, type=int, help="Number of noise octaves")
@click.option("--scale-x", default=cte.SCALE_X, show_default=True, type=float, help="Noise scale along x")
@click.option("--scale-y", default=cte.SCALE_Y, show_default=True, type=float, help="Noise scale along y")
@click.option("--offset-x", default=cte.OFFSET_X, show_default=True, type=float, help="Noise offset along x")
@click.option("--offset-y", default=cte.OFFSET_Y, show_default=True, type=float, help="Noise offset along y")
@click.option("--lacunarity", default=cte.LACUNARITY, show_default=True, type=float, help="Frequency multiplier per octave")
@click.option("--gain", default=cte.GAIN, show_default=True, type=float, help="Amplitude multiplier per octave")
@click.option("--blur/--no-blur", default=cte.APPLY_BLUR, show_default=True, help="Apply the directional blur")
@click.option("--blur-angle", default=cte.BLUR_ANGLE, show_default=True, type=float,
              help="Blur angle in degrees (0 horizontal, 90 vertical)")
@click.option("--blur-strength", default=cte.BLUR_STRENGTH, show_default=True, type=int,
              help="Blur sample radius in pixels")
@click.option("--seed", default=cte.SEED, show_default=True, type=int, help="Perlin permutation seed")
@click.option("--config", "-c", type=click.Path(exists=True, dir_okay=False), default=None,
              help="JSON file with parameter values (explicit options take precedence)")
@click.option("--arch", type=click.Choice(["cpu", "gpu"]), default="cpu", show_default=True,
              help="Taichi backend")
@click.option("--uint16", is_flag=True, default=False, help="Save 16-bit grayscale instead of 8-bit RGBA")
@click.option("--preview", is_flag=True, default=False, help="Show the texture with matplotlib")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def generate(ctx, output, config, arch, uint16, preview, verbose, **options):
    """
    Generate a flow texture and save it to OUTPUT as PNG.

    Layers octaves of Perlin noise and optionally blurs the result along
    a direction to create streaks for wind or water flow effects.

    Examples:

        # Default 512x512 texture with horizontal streaks
        pft-generate flow.png

        # Diagonal flow, stronger streaks, 16-bit output
        pft-generate flow.png --blur-angle 45 --blur-strength 8 --uint16

        # Parameters from a config file, overriding the seed
        pft-generate flow.png -c flow.json --seed 7
    """
    try:
        params = build_parameters(ctx, options, config)
        if verbose:
            click.echo(f"Parameters: {json.dumps(params.to_dict())}")

        _init_taichi(arch, verbose)

        if verbose:
            click.echo(f"Generating {params.width}x{params.height} flow texture...")
        texture = pft.generate_flow_texture(params)

        path = pft.misc.save_png(texture.pixels, output, uint16=uint16)
        if verbose:
            click.echo(f"Saved PNG ({'16-bit gray' if uint16 else '8-bit RGBA'}) to '{path}'")
        else:
            click.echo(f"Generated '{path}'")

        if preview:
            pft.visu.preview(texture.pixels, title=str(path))

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_image", type=click.Path(exists=True, dir_okay=False))
@click.argument("output", type=click.Path(dir_okay=False))
@click.option("--angle", "-a", default=cte.BLUR_ANGLE, show_default=True, type=float,
              help="Blur angle in degrees (0 horizontal, 90 vertical)")
@click.option("--strength", "-s", default=cte.BLUR_STRENGTH, show_default=True, type=int,
              help="Blur sample radius in pixels")
@click.option("--arch", type=click.Choice(["cpu", "gpu"]), default="cpu", show_default=True,
              help="Taichi backend")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def blur(input_image, output, angle, strength, arch, verbose):
    """Apply a directional blur to INPUT_IMAGE and save it to OUTPUT as PNG."""
    try:
        if verbose:
            click.echo(f"Loading '{input_image}'...")
        pixels = pft.misc.load_png(input_image)

        _init_taichi(arch, verbose)

        if verbose:
            click.echo(f"Blurring {pixels.shape[1]}x{pixels.shape[0]} image, angle={angle}, strength={strength}")
        result = pft.rastermanip.directional_blur(pixels, angle, strength)

        path = pft.misc.save_png(result, output)
        click.echo(f"Blurred '{input_image}' -> '{path}'")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


__all__ = ["generate", "blur", "build_parameters"]
