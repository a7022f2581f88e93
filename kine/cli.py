'''Helpers shared by the kine sub commands

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import contextlib
import logging

import click
from botocore.exceptions import BotoCoreError, ClientError

from kine.errors import KineError

CLI_ERRORS = (KineError, ClientError, BotoCoreError)


@contextlib.contextmanager
def exitOnError():
    '''Log resharding and aws errors, then exit with a non zero status'''
    try:
        yield
    except CLI_ERRORS as e:
        if e.__cause__ is not None:
            logging.error(f'{e}: {e.__cause__}')
        else:
            logging.error(f'{e}')
        raise click.exceptions.Exit(1)
