'''Kinesis client

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.

boto3 is blocking, calls are run in the default executor so that
the resharding coroutines can keep on using asyncio.sleep
'''

import asyncio
import functools
import logging

import boto3

from kine.commands.stream import StreamCommandsMixin


def makeKinesisClient(config):
    session = boto3.session.Session(profile_name=config.profile)
    return session.client(
        'kinesis', region_name=config.region, endpoint_url=config.endpoint
    )


class KinesisClient(StreamCommandsMixin):
    def __init__(self, config=None, kinesis=None):
        if kinesis is None:
            if config is None:
                raise ValueError('a config or a boto3 kinesis client is required')
            kinesis = makeKinesisClient(config)

        self.config = config
        self.kinesis = kinesis

    @property
    def endpoint(self):
        return self.kinesis.meta.endpoint_url

    @property
    def region(self):
        return self.kinesis.meta.region_name

    async def send(self, operation, **params):
        '''Call a boto3 kinesis operation, by its python name'''
        method = getattr(self.kinesis, operation)

        logging.debug(f'{operation} {params}')

        loop = asyncio.get_running_loop()
        response = await loop.run_in_executor(None, functools.partial(method, **params))
        return response
