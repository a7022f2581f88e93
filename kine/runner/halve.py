'''Halve the number of shards of a stream

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import click

from kine.cli import exitOnError
from kine.kine import Kine


@click.command()
@click.argument('stream')
@click.option('--dry', is_flag=True, help='Print the merge commands, do not run them')
@click.pass_obj
def halve(config, stream, dry):
    '''Merge the open shards two by two, in hash key order

    \b
    kine halve my-stream
    kine --odd_shard_policy skip-last halve my-stream
    '''

    with exitOnError():
        Kine(config).halveShards(stream, dry)
