'''Kine configuration, optionally persisted in a yaml file

Copyright (c) 2020 Machine Zone, Inc. All rights reserved.
'''

import logging
import os
from pathlib import Path

import yaml

DEFAULT_POLL_INTERVAL = 5

ODD_SHARD_POLICY_REJECT = 'reject'
ODD_SHARD_POLICY_SKIP_LAST = 'skip-last'
ODD_SHARD_POLICIES = (ODD_SHARD_POLICY_REJECT, ODD_SHARD_POLICY_SKIP_LAST)

FIELDS = ('region', 'endpoint', 'profile', 'poll_interval', 'timeout', 'odd_shard_policy')


def isNumber(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class KineConfig:
    def __init__(
        self,
        region=None,
        endpoint=None,
        profile=None,
        poll_interval=DEFAULT_POLL_INTERVAL,
        timeout=None,
        odd_shard_policy=ODD_SHARD_POLICY_REJECT,
    ) -> None:
        self.region = region
        self.endpoint = endpoint
        self.profile = profile
        self.poll_interval = poll_interval
        self.timeout = timeout
        self.odd_shard_policy = odd_shard_policy

        self.validate()

    def validate(self):
        if not isNumber(self.poll_interval) or self.poll_interval < 0:
            raise ValueError(f'invalid poll_interval: {self.poll_interval!r}')

        if self.timeout is not None:
            if not isNumber(self.timeout) or self.timeout <= 0:
                raise ValueError(f'invalid timeout: {self.timeout!r}')

        if self.odd_shard_policy not in ODD_SHARD_POLICIES:
            raise ValueError(
                f'invalid odd_shard_policy: {self.odd_shard_policy!r}, '
                f'must be one of {", ".join(ODD_SHARD_POLICIES)}'
            )

        if self.endpoint is not None and '://' not in self.endpoint:
            raise ValueError(f'endpoint must be an url: {self.endpoint!r}')

    def asDict(self) -> dict:
        return {field: getattr(self, field) for field in FIELDS}

    def override(self, **kwargs):
        '''New config where the non None values replace ours'''
        data = self.asDict()
        data.update({key: val for key, val in kwargs.items() if val is not None})
        return KineConfig(**data)

    @classmethod
    def load(cls, path: str):
        if not os.path.exists(path):
            msg = f'Config file does not exists: "{path}", using defaults. '
            msg += 'Use `kine init` to create a default config file'
            logging.warning(msg)
            return cls()

        with open(path) as f:
            try:
                data = yaml.load(f.read(), Loader=yaml.FullLoader) or {}
            except yaml.YAMLError as e:
                raise ValueError(f'{path}: invalid yaml: {e}')

        if not isinstance(data, dict):
            raise ValueError(f'{path}: config must be a mapping')

        unknown = set(data) - set(FIELDS)
        if unknown:
            raise ValueError(f'{path}: unknown config keys {sorted(unknown)}')

        return cls(**data)

    def save(self, path: str):
        with open(path, 'w') as f:
            yaml.dump(self.asDict(), f, default_flow_style=False)


def getDefaultConfigPath():
    path = os.getenv('KINE_CONFIG')
    if path:
        return path

    path = Path.home() / '.kine.yaml'
    return str(path)
