import os
from typing import Mapping, Optional

from attrs import define, field
from attrs.validators import in_, instance_of, optional
from aws_lambda_powertools import Logger

import common.constants as constants

logger = Logger(service=constants.SERVICE_NAME)


@define(slots=True, frozen=True, kw_only=True)
class DeploymentSettings:
    """Deployment settings resolved from the process environment.

    The region is pinned to ``eu-west-1``; subnet availability zones are
    literals in that region.
    """

    account: Optional[str] = field(default=None, validator=optional(instance_of(str)))
    region: str = field(default=constants.DEFAULT_REGION, init=False)
    env: str = field(default=constants.DEFAULT_ENV, validator=in_(constants.DEPLOY_ENVS))
    public_key_path: Optional[str] = field(
        default=None,
        validator=optional(instance_of(str)),
        metadata={"description": "Local path to an SSH public key for the EC2 key pair"},
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "DeploymentSettings":
        environ = os.environ if environ is None else environ
        return cls(
            account=environ.get(constants.ENV_ACCOUNT) or None,
            env=environ.get(constants.ENV_DEPLOY_ENV, constants.DEFAULT_ENV),
            public_key_path=environ.get(constants.ENV_PUBLIC_KEY_PATH) or None,
        )

    def read_public_key(self) -> Optional[str]:
        """Return the public key material, or None when no path is configured."""
        if not self.public_key_path:
            return None
        path = os.path.expanduser(self.public_key_path)
        logger.info("Reading EC2 public key", path=path)
        with open(path) as file:
            return file.read().strip()
