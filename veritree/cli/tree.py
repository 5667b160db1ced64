"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Veritree, a product of Garudex Labs

CLI commands for Merkle tree operations.

Provides commands for:
- Computing the root of a list of items
- Generating an inclusion proof for one item
- Verifying a proof against a root
- Displaying the tree structure
"""

import json
import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import click
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from veritree.cli.context import CLIContext, handle_veritree_error, pass_context
from veritree.merkle import (
    InternalNode,
    MerkleTree,
    MerkleVerifier,
    Node,
    decode_proof,
    encode_proof,
)


def read_items(items: Tuple[str, ...], file: Optional[Path]) -> List[str]:
    """
    Collect items from command-line arguments and an optional file.

    File items are read one per line; blank lines are skipped.
    Arguments come first, followed by file lines.
    """
    collected = list(items)
    if file is not None:
        for line in file.read_text(encoding="utf-8").splitlines():
            if line.strip():
                collected.append(line)
    return collected


def items_options(func):
    """Shared ITEMS argument, --file and --algorithm options."""
    func = click.option(
        '--algorithm',
        '-a',
        default=None,
        help='Hash algorithm (sha256, sha3_256, blake2b, blake2s, sha512; default: from configuration)',
    )(func)
    func = click.option(
        '--file',
        '-f',
        'file',
        type=click.Path(exists=True, dir_okay=False, path_type=Path),
        default=None,
        help='Read items from a file, one per line',
    )(func)
    func = click.argument('items', nargs=-1)(func)
    return func


@click.command('root')
@items_options
@click.option(
    '--show-tree',
    is_flag=True,
    help='Print the tree structure below the root',
)
@pass_context
@handle_veritree_error
def root(ctx: CLIContext, items, file, algorithm, show_tree):
    """
    Compute the Merkle root of ITEMS.

    Examples:

        veritree root alice bob carol

        veritree root --file addresses.txt --algorithm sha256 --show-tree
    """
    tree = ctx.get_builder(algorithm).build(read_items(items, file))

    click.echo(tree.root_hex)
    if show_tree:
        click.echo(tree.render())


@click.command('prove')
@click.argument('value')
@items_options
@pass_context
@handle_veritree_error
def prove(ctx: CLIContext, value, items, file, algorithm):
    """
    Generate an inclusion proof for VALUE in a tree built from ITEMS.

    The proof is printed as a JSON array of hex digests, leaf level first.

    Examples:

        veritree prove bob alice bob carol

        veritree prove bob --file names.txt > proof.json
    """
    tree = ctx.get_builder(algorithm).build(read_items(items, file))
    proof = tree.get_proof(value)

    if proof is None:
        click.echo(f"Error: Value not found in tree: {value}", err=True)
        sys.exit(1)

    click.echo(json.dumps(encode_proof(proof)))


@click.command('verify')
@click.argument('value')
@click.option(
    '--root',
    '-r',
    'root_hex',
    required=True,
    help='Expected root digest (hex)',
)
@click.option(
    '--proof',
    '-p',
    'proof_json',
    required=True,
    help='Proof as a JSON array of hex digests, or "-" to read it from stdin',
)
@click.option(
    '--algorithm',
    '-a',
    default=None,
    help='Hash algorithm the tree was built with (default: from configuration)',
)
@pass_context
@handle_veritree_error
def verify(ctx: CLIContext, value, root_hex, proof_json, algorithm):
    """
    Verify that VALUE is included under a root digest.

    Exits with status 0 when the proof is valid and 1 otherwise.

    Examples:

        veritree verify bob --root 5c1f... --proof '["ab12...", "cd34..."]'

        veritree prove bob alice bob carol | veritree verify bob --root 5c1f... --proof -
    """
    if proof_json == "-":
        proof_json = click.get_text_stream("stdin").read()

    try:
        entries = json.loads(proof_json)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="'--proof'")
    if not isinstance(entries, list):
        raise click.BadParameter("must be a JSON array of hex strings", param_hint="'--proof'")

    try:
        root_digest = bytes.fromhex(root_hex[2:] if root_hex.lower().startswith("0x") else root_hex)
    except ValueError:
        raise click.BadParameter(f"not a hex digest: {root_hex}", param_hint="'--root'")

    verifier = MerkleVerifier(ctx.get_algorithm(algorithm))
    if verifier.verify(root_digest, decode_proof(entries), value):
        click.echo("valid")
    else:
        click.echo("invalid")
        sys.exit(1)


def _label_leaves(tree: MerkleTree, items: List[str]) -> Dict[bytes, str]:
    labels: Dict[bytes, str] = {}
    for item in items:
        labels.setdefault(tree.digest(item), item)
    return labels


def _add_branch(parent: Tree, node: Node, labels: Dict[bytes, str]) -> None:
    if isinstance(node, InternalNode):
        branch = parent.add(f"[bold]{node.hex()[:16]}[/bold]")
        _add_branch(branch, node.left, labels)
        _add_branch(branch, node.right, labels)
    else:
        parent.add(f"{node.hex()[:16]}  [green]{escape(labels.get(node.digest, '?'))}[/green]")


@click.command('show')
@items_options
@pass_context
@handle_veritree_error
def show(ctx: CLIContext, items, file, algorithm):
    """
    Display the tree built from ITEMS, with each leaf labelled by its item.

    Examples:

        veritree show alice bob carol
    """
    items = read_items(items, file)
    tree = ctx.get_builder(algorithm).build(items)
    labels = _label_leaves(tree, items)

    display = Tree(
        f"[bold]{tree.root_hex}[/bold] "
        f"({tree.leaf_count} leaves, depth {tree.depth}, {tree.algorithm.value})"
    )
    if isinstance(tree.root, InternalNode):
        _add_branch(display, tree.root.left, labels)
        _add_branch(display, tree.root.right, labels)
    else:
        display.label = f"{display.label}  [green]{escape(labels.get(tree.root.digest, '?'))}[/green]"

    Console().print(display)
