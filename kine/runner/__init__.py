'''kine main driver.

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.

# flake8: noqa
'''

from pkgutil import walk_packages

import click
import coloredlogs

from kine.config import ODD_SHARD_POLICIES, KineConfig, getDefaultConfigPath
from kine.version import VERSION

LOGGING_FORMAT = '%(asctime)s %(levelname)s %(message)s'
coloredlogs.install(level='WARNING', fmt=LOGGING_FORMAT)


@click.option('--verbose', '-v', envvar='KINE_VERBOSE', count=True)
@click.option('--config', 'config_path', envvar='KINE_CONFIG')
@click.option('--region', envvar='KINE_REGION')
@click.option('--endpoint', envvar='KINE_ENDPOINT', help='Custom kinesis endpoint url')
@click.option('--profile', envvar='KINE_PROFILE', help='AWS credentials profile')
@click.option('--poll_interval', envvar='KINE_POLL_INTERVAL', type=float)
@click.option(
    '--timeout',
    envvar='KINE_TIMEOUT',
    type=float,
    help='Max time to wait for the stream to be active, forever by default',
)
@click.option(
    '--odd_shard_policy',
    envvar='KINE_ODD_SHARD_POLICY',
    type=click.Choice(ODD_SHARD_POLICIES),
)
@click.group()
@click.version_option(version=VERSION)
@click.pass_context
def main(
    ctx,
    verbose,
    config_path,
    region,
    endpoint,
    profile,
    poll_interval,
    timeout,
    odd_shard_policy,
):
    """\b
Kine

Kine doubles or halves the number of shards of a kinesis stream
    """
    if verbose:
        level = 'INFO' if verbose == 1 else 'DEBUG'
        coloredlogs.install(level=level, fmt=LOGGING_FORMAT)

    if ctx.invoked_subcommand == 'init':
        ctx.obj = config_path or getDefaultConfigPath()
        return

    try:
        config = KineConfig.load(config_path or getDefaultConfigPath())
        config = config.override(
            region=region,
            endpoint=endpoint,
            profile=profile,
            poll_interval=poll_interval,
            timeout=timeout,
            odd_shard_policy=odd_shard_policy,
        )
    except ValueError as e:
        raise click.BadParameter(str(e))

    ctx.obj = config


for loader, module_name, is_pkg in walk_packages(__path__, __name__ + '.'):
    module = __import__(module_name, globals(), locals(), ['__name__'])
    cmd = getattr(module, module_name.rsplit('.', 1)[-1])
    if isinstance(cmd, click.Command):
        main.add_command(cmd)
