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

VOLUME_STATUSES = (
    VOLUME_STATUS_AVAILABLE, VOLUME_STATUS_CREATING,
    VOLUME_STATUS_DOWNLOADING, VOLUME_STATUS_DELETING,
    VOLUME_STATUS_ERROR,
) = (
    'available', 'creating',
    'downloading', 'deleting',
    'error',
)

METRIC_LABELS = (
    PROVIDER_OPENSTACK, SERVICE_CINDER,
) = (
    'openstack', 'cinder',
)

API_VERSIONS = (
    BLOCK_STORAGE_V2, BLOCK_STORAGE_V3,
) = (
    '2', '3',
)

ENDPOINT_INTERFACES = (
    INTERFACE_PUBLIC, INTERFACE_INTERNAL, INTERFACE_ADMIN,
) = (
    'public', 'internal', 'admin',
)
