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
Counters for requests issued against cloud APIs.

The counters are registered in the default prometheus_client registry; the
hosting process decides how they are exposed.
"""

from prometheus_client import Counter

from blockdrv.common import consts

NAMESPACE = 'mcm'
SUBSYSTEM = 'cloud_api'
LABELS = ('provider', 'service')

API_REQUEST_COUNT = Counter(
    'requests_total',
    'Number of cloud API requests, partitioned by provider and service.',
    LABELS, namespace=NAMESPACE, subsystem=SUBSYSTEM)

API_FAILED_REQUEST_COUNT = Counter(
    'requests_failed_total',
    'Number of failed cloud API requests, partitioned by provider and '
    'service.',
    LABELS, namespace=NAMESPACE, subsystem=SUBSYSTEM)


def inc_request(service, provider=consts.PROVIDER_OPENSTACK):
    API_REQUEST_COUNT.labels(provider=provider, service=service).inc()


def inc_failure(service, provider=consts.PROVIDER_OPENSTACK):
    API_FAILED_REQUEST_COUNT.labels(provider=provider, service=service).inc()
