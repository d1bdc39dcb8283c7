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
Routines for configuring blockdrv.
"""

from oslo_config import cfg
from oslo_log import log as logging

from blockdrv.common import consts
from blockdrv.common.i18n import _

openstack_group = cfg.OptGroup('openstack')
openstack_opts = [
    cfg.StrOpt('auth_url',
               help=_('Complete public identity V3 API endpoint.')),
    cfg.StrOpt('username',
               help=_('User name used to authenticate against the cloud.')),
    cfg.StrOpt('password', secret=True,
               help=_('Password of the user.')),
    cfg.StrOpt('token', secret=True,
               help=_('Pre-issued token; used instead of the password when '
                      'set.')),
    cfg.StrOpt('project_name',
               help=_('Name of the project to scope to.')),
    cfg.StrOpt('project_id',
               help=_('ID of the project to scope to.')),
    cfg.StrOpt('user_domain_name', default='Default',
               help=_('Name of the domain the user belongs to.')),
    cfg.StrOpt('project_domain_name', default='Default',
               help=_('Name of the domain the project belongs to.')),
    cfg.StrOpt('region_name',
               help=_('Region in which the block storage endpoint lives.')),
    cfg.StrOpt('interface', default=consts.INTERFACE_PUBLIC,
               choices=consts.ENDPOINT_INTERFACES,
               help=_('Type of endpoint to use from the service catalog.')),
    cfg.StrOpt('block_storage_api_version',
               default=consts.BLOCK_STORAGE_V2,
               choices=consts.API_VERSIONS,
               help=_('Block storage (Cinder) API version.')),
    cfg.BoolOpt('insecure', default=False,
                help=_('Skip TLS certificate verification.')),
    cfg.StrOpt('cafile',
               help=_('CA bundle used to verify TLS certificates.')),
]

cfg.CONF.register_group(openstack_group)
cfg.CONF.register_opts(openstack_opts, group=openstack_group)


def parse_args(argv, default_config_files=None):
    logging.register_options(cfg.CONF)
    cfg.CONF(argv[1:],
             project='blockdrv',
             default_config_files=default_config_files)
    logging.setup(cfg.CONF, 'blockdrv')


def list_opts():
    yield openstack_group.name, openstack_opts
