'''Double the number of shards of a stream

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import click

from kine.cli import exitOnError
from kine.kine import Kine


@click.command()
@click.argument('stream')
@click.option('--dry', is_flag=True, help='Print the split commands, do not run them')
@click.pass_obj
def double(config, stream, dry):
    '''Split every open shard at the middle of its hash key range

    \b
    kine --region us-east-1 double my-stream
    '''

    with exitOnError():
        Kine(config).doubleShards(stream, dry)
