"""
Command-line interface for molselect.

Provides the `molselect` command for evaluating selections on PDB files.
"""

import sys

import click

from molselect import __version__


def _format_atom(atom) -> str:
    return (
        f"{atom.serial:>6d}  {atom.model}  {atom.chain or '-':>1}  "
        f"{atom.resn:<4} {atom.resi:>5d}  {atom.name:<4} {atom.elem}"
    )


@click.command()
@click.argument("pdb_file", type=click.Path(exists=True), required=False)
@click.argument("expression", required=False, default="all")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option(
    "--no-fast-path", is_flag=True, help="Always evaluate atom by atom"
)
@click.option(
    "--require-match", is_flag=True, help="Fail if the selection is empty"
)
@click.option("--show-ast", is_flag=True, help="Print the parsed selection")
@click.option("--show-spec", is_flag=True, help="Print the compiled spec, if any")
@click.option("-c", "--count", is_flag=True, help="Only print the number of atoms")
@click.option("-O", "--output", type=click.Path(), help="Write selected atoms to PDB")
@click.option("--version", is_flag=True, help="Show version and exit")
def main(
    pdb_file,
    expression,
    verbose,
    no_fast_path,
    require_match,
    show_ast,
    show_spec,
    count,
    output,
    version,
):
    """
    molselect: PyMOL-style atom selections

    Evaluates a selection expression against the atoms of a PDB file and
    lists the matching atoms.

    Example usage:

        molselect protein.pdb "name CA and chain A"

        molselect -c complex.pdb "byres around 5 ligand"

        molselect complex.pdb "water" -O water.pdb
    """
    if version:
        click.echo(f"molselect version {__version__}")
        return

    if pdb_file is None:
        raise click.UsageError("Missing argument 'PDB_FILE'.")

    try:
        from molselect.selection.compiler import to_spec
        from molselect.selection.nodes import ALL
        from molselect.selection.parser import parse
        from molselect.selector import Selector

        if show_ast or show_spec:
            # Blank selects everything, as in resolve_selection
            text = (expression or "").strip()
            ast = parse(text) if text else ALL
            if show_ast:
                click.echo(f"AST: {ast!r}")
            if show_spec:
                click.echo(f"Spec: {to_spec(ast)!r}")

        s = Selector(
            verbose=verbose,
            use_fast_path=not no_fast_path,
            require_match=require_match,
        )
        result = s.select_file(pdb_file, expression, output)

        if count:
            click.echo(len(result.atoms))
        else:
            for atom in result.atoms:
                click.echo(_format_atom(atom))

        if verbose:
            click.echo()
            click.echo("Selection complete!")
            click.echo(f"  Atoms: {len(result.atoms)}")
            if output:
                click.echo(f"  Output: {output}")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        if verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
