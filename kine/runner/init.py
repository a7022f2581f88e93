'''Write a default kine config file

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import click

from kine.config import KineConfig


@click.command()
@click.option('--region')
@click.option('--endpoint')
@click.pass_obj
def init(path, region, endpoint):
    '''Write a default config file (~/.kine.yaml, or $KINE_CONFIG)
    '''

    try:
        config = KineConfig(region=region, endpoint=endpoint)
    except ValueError as e:
        raise click.BadParameter(str(e))

    config.save(path)

    # dump to the console
    with open(path) as f:
        print(f.read())
