"""Click CLI for the gene parser."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import click

from axiegenes.config import (
    LAYOUT_CHOICES,
    derive_parts_path,
    derive_traits_path,
    missing_data_files,
)
from axiegenes.genes.errors import GeneError
from axiegenes.profiles import (
    Config,
    load_config,
    resolve_data_dir,
    save_config,
    validate_profile_name,
)


class Context:
    """Holds the data directory resolved from --data-dir / --profile / config."""

    def __init__(self, data_dir: Path | None = None, profile: str | None = None):
        self._explicit_data_dir = data_dir
        self._profile_name = profile
        self._resolved_data_dir: Path | None = None
        self._decoder = None

    @property
    def data_dir(self) -> Path:
        if self._resolved_data_dir is None:
            self._resolved_data_dir = resolve_data_dir(self._explicit_data_dir, self._profile_name)
        return self._resolved_data_dir

    @property
    def decoder(self):
        """GeneDecoder over the resolved data directory (tables loaded once)."""
        if self._decoder is None:
            from axiegenes.data.loader import load_catalog_once
            from axiegenes.genes.decoders import GeneDecoder

            try:
                traits, parts = load_catalog_once(
                    derive_traits_path(self.data_dir), derive_parts_path(self.data_dir),
                )
            except GeneError as e:
                raise click.ClickException(str(e)) from e
            self._decoder = GeneDecoder(traits, parts)
        return self._decoder


pass_ctx = click.make_pass_decorator(Context)

layout_option = click.option(
    "--layout", type=click.Choice(LAYOUT_CHOICES), default="auto", show_default=True,
    help="Bit layout (auto picks by gene width)",
)


@click.group()
@click.option(
    "--data-dir", required=False, default=None,
    type=click.Path(exists=False, file_okay=False, path_type=Path),
    help="Directory containing traits.json and parts.json (optional if profiles configured)",
)
@click.option(
    "--profile", "-p", default=None, type=str,
    help="Named profile to use (from axg init)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(package_name="axiegenes")
@click.pass_context
def cli(ctx, data_dir: Optional[Path], profile: Optional[str], verbose: bool):
    """axg - gene parser.

    Decode 256-bit and 512-bit gene hex strings into classes, parts,
    colors and a gene quality score.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    ctx.ensure_object(dict)
    ctx.obj = Context(data_dir=data_dir, profile=profile)


def _profile_name(value: str) -> str:
    name = value.strip()
    if not validate_profile_name(name):
        raise click.BadParameter(f"Invalid profile name '{name}'. Use letters, digits, hyphens, underscores.")
    return name


def _data_dir(value: str) -> Path:
    data_dir = Path(value.strip().strip('"').strip("'"))
    missing = missing_data_files(data_dir)
    if missing:
        raise click.BadParameter(f"Missing in {data_dir}: {', '.join(p.name for p in missing)}")
    return data_dir


@cli.command()
def init():
    """Set up config profiles for data directories (interactive)."""
    config = load_config()
    if config.profiles:
        click.echo("Current profiles:\n" + "\n".join(config.describe()) + "\n")
        if not click.confirm("Overwrite existing configuration?", default=False):
            click.echo("Aborted.")
            return
        config = Config()

    click.echo("Each profile names a directory holding traits.json and parts.json.\n")
    while True:
        name = click.prompt(
            "Profile name", default="default" if not config.profiles else None, value_proc=_profile_name,
        )
        data_dir = click.prompt("Data directory", value_proc=_data_dir)
        make_default = bool(config.profiles) and click.confirm(
            f"Set '{name}' as the default profile?", default=False,
        )
        config.add(name, data_dir, default=make_default)
        if not click.confirm("Add another profile?", default=False):
            break

    click.echo(f"\nConfig saved to {save_config(config)}\n")
    click.echo("Profiles:\n" + "\n".join(config.describe()))


def _format_text(genes) -> str:
    lines = [
        f"Class:      {genes.cls}",
        f"Region:     {genes.region}",
        f"Tag:        {genes.tag or '(none)'}",
        f"Body skin:  {genes.body_skin or '(none)'}",
        f"Pattern:    {genes.pattern.d} / {genes.pattern.r1} / {genes.pattern.r2}",
        f"Color:      {genes.color.d} / {genes.color.r1} / {genes.color.r2}",
        "",
        f"{'Part':<7} {'D':<22} {'R1':<22} {'R2':<22}",
        "-" * 75,
    ]
    for part_type, part in genes.parts().items():
        d = f"{part.d.name} ({part.d.cls})"
        if part.mystic:
            d += " *"
        lines.append(
            f"{part_type:<7} {d:<22} {part.r1.name + ' (' + part.r1.cls + ')':<22} "
            f"{part.r2.name + ' (' + part.r2.cls + ')':<22}"
        )
    lines.append("")
    lines.append(f"Quality:    {genes.quality:.2f}")
    return "\n".join(lines)


@cli.command()
@click.argument("hex_str")
@layout_option
@click.option("--format", "fmt", type=click.Choice(["json", "text"]), default="json")
@pass_ctx
def decode(ctx: Context, hex_str: str, layout: str, fmt: str):
    """Decode a single gene hex (0x...)."""
    from axiegenes.export.json_export import genes_to_dict

    try:
        genes = ctx.decoder.parse_hex_decode(hex_str, layout)
    except GeneError as e:
        raise click.ClickException(str(e)) from e

    if fmt == "json":
        click.echo(json.dumps(genes_to_dict(genes), indent=2))
    else:
        click.echo(_format_text(genes))


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@layout_option
@click.option("--format", "fmt", type=click.Choice(["json", "csv"]), default="json")
@click.option("--output", "-o", "output_path", type=click.Path(), default=None,
              help="Write output to a file instead of stdout")
@pass_ctx
def batch(ctx: Context, path: Path, layout: str, fmt: str, output_path: Optional[str]):
    """Decode one gene hex per line of a file."""
    from axiegenes.export.csv_export import export_csv
    from axiegenes.export.json_export import export_json

    decoded = []
    for lineno, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
        hex_str = line.strip()
        if not hex_str or hex_str.startswith("#"):
            continue
        try:
            decoded.append((hex_str, ctx.decoder.parse_hex_decode(hex_str, layout)))
        except GeneError as e:
            raise click.ClickException(f"{path}:{lineno}: {e}") from e

    text = export_json(decoded) if fmt == "json" else export_csv(decoded)
    if output_path:
        Path(output_path).write_text(text, encoding="utf-8")
        click.echo(f"{len(decoded):,} genes written to {output_path}")
    else:
        click.echo(text)


@cli.command()
@click.argument("cls")
@click.argument("part_type")
@click.argument("code")
@click.option("--skin", default="global", show_default=True, help="Skin variant to resolve")
@pass_ctx
def trait(ctx: Context, cls: str, part_type: str, code: str, skin: str):
    """Resolve a trait code (6-bit binary) to its name and registry record."""
    try:
        name = ctx.decoder.get_part_name(cls, part_type, code, skin)
        gene = ctx.decoder.get_part_gene(part_type, name)
    except GeneError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Name:     {gene.name}")
    click.echo(f"Part ID:  {gene.part_id}")
    click.echo(f"Class:    {gene.cls}")
    click.echo(f"Type:     {gene.part_type}")
    if gene.special_genes:
        click.echo(f"Special:  {gene.special_genes}")


@cli.command()
@click.argument("hex_str")
@layout_option
def bits(hex_str: str, layout: str):
    """Show the binary fields of a gene hex without decoding them."""
    from axiegenes.genes.layout import parse_hex

    try:
        gbg = parse_hex(hex_str, layout)
    except GeneError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Layout: {gbg.layout.name} ({gbg.layout.bits} bits)\n")
    for name, (start, end) in gbg.layout.fields.items():
        click.echo(f"  {name:<10} [{start:>3}:{end:<3}] {getattr(gbg, name)}")


@cli.command()
@click.argument("query")
@click.option("--type", "part_type", default=None, help="Only parts of this type (e.g. ears)")
@pass_ctx
def search(ctx: Context, query: str, part_type: Optional[str]):
    """Search the part registry by name."""
    results = ctx.decoder.parts.search(query)
    if part_type:
        results = [p for p in results if p.part_type == part_type]

    if not results:
        click.echo(f"No parts found matching '{query}'.")
        return

    click.echo(f"Found {len(results)} parts:\n")
    for p in sorted(results, key=lambda p: p.part_id):
        special = f"  [{p.special_genes}]" if p.special_genes else ""
        click.echo(f"  {p.part_id:<24} {p.name:<20} {p.cls}{special}")
