import click


def _parse_lengths(value: str) -> tuple[int, ...]:
    """Parse a comma-separated lengths string like '5,6'. Raises click.BadParameter on invalid input."""
    try:
        parts = [p.strip() for p in value.split(",") if p.strip()]
        if not parts:
            raise ValueError
        result = tuple(int(p) for p in parts)
        if any(n < 1 for n in result):
            raise ValueError
        return result
    except ValueError:
        raise click.BadParameter(f"Expected comma-separated positive integers (e.g. 5,6), got '{value}'.")


class _ExclusiveFlag(click.Option):
    """Flag that refuses to be combined with the flags named in `excludes`."""

    def __init__(self, *args, excludes=(), **kwargs):
        self.excludes = tuple(excludes)
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        if self.name in opts:
            clash = next((other for other in self.excludes if other in opts), None)
            if clash is not None:
                raise click.UsageError(f"--{self.name} cannot be used with --{clash}.")
        return super().handle_parse_result(ctx, opts, args)


@click.group()
@click.option("--dict-dir", "-d", default=None, type=click.Path(file_okay=False), help="Directory with all.txt and <N>.txt word lists. Defaults to the bundled dictionary.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Show debug output.", cls=_ExclusiveFlag, excludes=["quiet"])
@click.option("--quiet", "-q", is_flag=True, default=False, help="Suppress all output except errors.", cls=_ExclusiveFlag, excludes=["verbose"])
@click.option("--log-file", default=None, type=click.Path(), help="Write log entries to file.")
@click.pass_context
def cli(ctx, dict_dir, verbose, quiet, log_file):
    """Pick random words from line-delimited word lists."""
    from wordsampler.ui import Console
    from wordsampler.logging_config import setup_logging

    ctx.ensure_object(dict)
    ctx.obj["dict_dir"] = dict_dir
    ctx.obj["console"] = Console(quiet=quiet, verbose=verbose)
    ctx.obj["logger"] = setup_logging(verbose=verbose, quiet=quiet, log_file=log_file)


@cli.command()
@click.option("--count", "-c", default=None, type=int, help="Number of words to pick. Defaults to 10.")
@click.option("--length", "-l", "length", multiple=True, type=int, help="Only pick words of this length. Repeatable.")
@click.option("--lengths", default=None, help="Comma-separated word lengths (e.g. 5,6).")
@click.option("--preset", default=None, help="Load count/lengths from a named preset (e.g. short, long).")
@click.option("--seed", default=None, type=int, help="Seed the random generator for repeatable output.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print words and diagnostics as JSON.")
@click.pass_context
def words(ctx, count, length, lengths, preset, seed, as_json):
    """Print random words, one per line."""
    import json
    import random
    from dataclasses import asdict
    from wordsampler.sampler import InvalidRequestError, SampleRequest, WordSampler

    requested = list(length)
    if lengths:
        requested.extend(_parse_lengths(lengths))

    dict_dir = ctx.obj["dict_dir"]
    if preset:
        from wordsampler.config import load_preset, merge_config
        try:
            preset_cfg = load_preset(preset)
        except (FileNotFoundError, ValueError) as e:
            raise click.BadParameter(str(e), param_hint="--preset")
        overrides = {"count": count, "lengths": requested or None, "dict_dir": dict_dir}
        cfg = merge_config(preset_cfg, overrides)
        count = cfg.get("count", count)
        requested = list(cfg.get("lengths") or [])
        dict_dir = cfg.get("dict_dir", dict_dir)

    if count is None:
        count = 10

    try:
        request = SampleRequest.build(count, requested)
    except InvalidRequestError as e:
        raise click.BadParameter(str(e))

    console = ctx.obj["console"]
    rng = random.Random(seed) if seed is not None else None
    sampler = WordSampler(root=dict_dir, rng=rng)
    console.debug(f"Sampling {request.count} words from {sampler.root} (lengths: {list(request.lengths) or 'all'})")
    result = sampler.sample(request)

    if as_json:
        click.echo(json.dumps({
            "words": result.words,
            "diagnostics": [asdict(d) for d in result.diagnostics],
        }, indent=2, default=str))
        return

    console.diagnostics(result.diagnostics)
    for w in result.words:
        click.echo(w)
    if len(result.words) < request.count:
        console.info(f"Only {len(result.words)} of {request.count} words available.")


@cli.command("lengths")
@click.pass_context
def list_lengths(ctx):
    """List word lengths that have a word list in the dictionary directory."""
    from wordsampler.sampler import WordSampler

    sampler = WordSampler(root=ctx.obj["dict_dir"])
    available = sampler.available_lengths()
    if not available:
        ctx.obj["console"].info(f"No per-length word lists found in {sampler.root}")
        return
    for n in available:
        click.echo(n)


@cli.command("presets")
def list_presets_cmd():
    """List available preset names."""
    from wordsampler.config import list_presets

    for name in list_presets():
        click.echo(name)


if __name__ == "__main__":
    cli()
