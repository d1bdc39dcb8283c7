# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.

"""
SDK Client
"""

import functools

from openstack import connection
from openstack import exceptions as sdk_exc
from oslo_config import cfg
from oslo_log import log as logging

from blockdrv.common import exception
from blockdrv.common import metrics

USER_AGENT = 'blockdrv'
LOG = logging.getLogger(__name__)

cfg.CONF.import_group('openstack', 'blockdrv.common.config')

AUTH_KEYS = (
    AUTH_URL, USERNAME, PASSWORD, TOKEN, PROJECT_NAME, PROJECT_ID,
    USER_DOMAIN_NAME, PROJECT_DOMAIN_NAME,
) = (
    'auth_url', 'username', 'password', 'token', 'project_name',
    'project_id', 'user_domain_name', 'project_domain_name',
)

# Keys the token plugin does not accept.
_PASSWORD_ONLY_KEYS = (USERNAME, PASSWORD, USER_DOMAIN_NAME)


def is_not_found(ex):
    """Check whether an exception means the requested resource is missing.

    :param ex: An exception raised by the SDK or by a driver.
    :returns: True if the exception represents a 404 condition.
    """
    if isinstance(ex, (sdk_exc.NotFoundException,
                       exception.ResourceNotFound)):
        return True

    return getattr(ex, 'status_code', None) == 404


def metered(service, missing_is_failure=True):
    """Decorator recording request and failure counts of a driver call.

    The request counter is bumped once per call. When the call raises, the
    failure counter is bumped too, unless the error is a not-found and
    ``missing_is_failure`` is False. Errors are re-raised untouched.

    :param service: The service label to record, e.g. 'cinder'.
    :param missing_is_failure: Whether a not-found error counts as a failure.
    """

    def decorator(func):
        @functools.wraps(func)
        def invoke_with_metrics(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except Exception as ex:
                if missing_is_failure or not is_not_found(ex):
                    metrics.inc_failure(service)
                raise
            finally:
                metrics.inc_request(service)

        return invoke_with_metrics

    return decorator


def _build_auth(params):
    conf = cfg.CONF.openstack
    auth = {}
    for key in AUTH_KEYS:
        value = params.pop(key, None) or getattr(conf, key)
        if value:
            auth[key] = value

    if auth.get(TOKEN):
        for key in _PASSWORD_ONLY_KEYS:
            auth.pop(key, None)
        return 'token', auth

    auth.pop(TOKEN, None)
    return 'password', auth


def create_connection(params=None):
    """Create an SDK connection to the cloud.

    :param params: A dict of authentication and endpoint parameters. Any key
        that is not provided falls back to the ``[openstack]`` option group.
    :returns: An ``openstack.connection.Connection`` object.
    :raises: InternalError if the connection cannot be built.
    """
    params = dict(params or {})
    conf = cfg.CONF.openstack

    auth_type, auth = _build_auth(params)
    region_name = params.pop('region_name', None) or conf.region_name
    interface = params.pop('interface', None) or conf.interface
    api_version = (params.pop('block_storage_api_version', None) or
                   conf.block_storage_api_version)
    cafile = params.pop('cafile', None) or conf.cafile
    insecure = params.pop('insecure', conf.insecure)

    kwargs = {
        'auth_type': auth_type,
        'auth': auth,
        'interface': interface,
        'block_storage_api_version': api_version,
        'verify': not insecure,
        'app_name': USER_AGENT,
    }
    if region_name:
        kwargs['region_name'] = region_name
    if cafile:
        kwargs['cacert'] = cafile
    kwargs.update(params)

    LOG.debug('Creating connection to %(url)s in region %(region)s using '
              '%(interface)s endpoints.',
              {'url': auth.get(AUTH_URL), 'region': region_name,
               'interface': interface})
    try:
        conn = connection.Connection(**kwargs)
    except Exception as ex:
        raise exception.InternalError(message=str(ex))

    return conn
