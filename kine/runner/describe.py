'''Describe all the shards of a stream

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import click
import tabulate

from kine.cli import exitOnError
from kine.commands.stream import isOpen
from kine.kine import Kine


def makeRows(shards, openOnly):
    rows = [['shard', 'parent', 'adjacent parent', 'start', 'end', 'open']]

    for shard in shards:
        if openOnly and not isOpen(shard):
            continue

        rows.append(
            [
                shard.shard_id,
                shard.parent_shard_id or '',
                shard.adjacent_parent_shard_id or '',
                shard.hash_key_range.start,
                shard.hash_key_range.end,
                'yes' if isOpen(shard) else 'no',
            ]
        )

    return rows


@click.command()
@click.argument('stream')
@click.option('--open', 'open_only', is_flag=True, help='Only list the open shards')
@click.pass_obj
def describe(config, stream, open_only):
    '''List every shard of a stream, read while the stream is ACTIVE
    '''

    with exitOnError():
        description = Kine(config).describeTopology(stream)

    print(f'{description.name} {description.status}')
    rows = makeRows(description.shards, open_only)
    print(tabulate.tabulate(rows, tablefmt="simple", headers="firstrow"))
