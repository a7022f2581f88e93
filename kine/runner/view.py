'''Print the hash key space share of each open shard

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import click

from kine.cli import exitOnError
from kine.kine import Kine


@click.command()
@click.argument('stream')
@click.pass_obj
def view(config, stream):
    '''Print the open shards of a stream and their share of the keyspace
    '''

    with exitOnError():
        Kine(config).viewTopology(stream)
