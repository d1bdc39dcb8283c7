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

from oslo_log import log as logging

from blockdrv.common import consts
from blockdrv.common import exception
from blockdrv.common.i18n import _
from blockdrv.drivers import base
from blockdrv.drivers.openstack import sdk

LOG = logging.getLogger(__name__)

SERVICE = consts.SERVICE_CINDER


class CinderClient(base.DriverBase, base.Storage):
    """Cinder block storage driver.

    Talks to the Cinder v2 API unless the ``block_storage_api_version``
    connection parameter (or the ``[openstack]`` option of the same name)
    selects v3.
    """

    def __init__(self, params):
        super(CinderClient, self).__init__(params)
        try:
            self.conn = sdk.create_connection(self.conn_params)
        except exception.InternalError as ex:
            msg = _('Could not initialize storage client: %s') % ex
            raise exception.InternalError(message=msg)
        self.session = self.conn.session

    @sdk.metered(SERVICE, missing_is_failure=False)
    def get_volume(self, volume_id):
        return self.conn.block_storage.get_volume(volume_id)

    @sdk.metered(SERVICE)
    def create_volume(self, **attrs):
        return self.conn.block_storage.create_volume(**attrs)

    @sdk.metered(SERVICE)
    def volumes(self, details=True, **query):
        # Paging happens while iterating, so exhaust it inside the meter.
        return list(self.conn.block_storage.volumes(details=details, **query))

    @sdk.metered(SERVICE, missing_is_failure=False)
    def update_volume(self, volume_id, ignore_missing=True, **attrs):
        """Update a volume.

        :param volume_id: The ID of the volume to update.
        :param ignore_missing: When True, None is returned if the volume does
            not exist; otherwise the not-found error is raised.
        :returns: The updated volume, or None.
        """
        try:
            return self.conn.block_storage.update_volume(volume_id, **attrs)
        except Exception as ex:
            if not (ignore_missing and sdk.is_not_found(ex)):
                raise
            LOG.debug('Volume %s not found, nothing to update.', volume_id)
            return None

    @sdk.metered(SERVICE, missing_is_failure=False)
    def delete_volume(self, volume_id, ignore_missing=True):
        try:
            self.conn.block_storage.delete_volume(volume_id,
                                                  ignore_missing=False)
        except Exception as ex:
            if not (ignore_missing and sdk.is_not_found(ex)):
                raise
            LOG.debug('Volume %s already gone.', volume_id)

    def volume_id_from_name(self, name):
        """Resolve the given volume name to a unique ID.

        :param name: Exact name of the volume.
        :returns: The ID of the only volume carrying that name.
        :raises: ResourceNotFound if no volume matches, MultipleChoices if
            more than one does.
        """
        if not name:
            raise exception.InvalidParameter(name='name', value=name)

        found = [v for v in self.volumes(name=name) if v.name == name]
        if not found:
            raise exception.ResourceNotFound(type='volume', id=name)
        if len(found) > 1:
            raise exception.MultipleChoices(arg=name)

        return found[0].id

    @sdk.metered(SERVICE, missing_is_failure=False)
    def wait_for_volume_status(self, volume_id, status, failures=None,
                               interval=2, wait=120):
        """Wait until a volume reaches the given status.

        :param volume_id: The ID of the volume to watch.
        :param status: Desired status, e.g. consts.VOLUME_STATUS_AVAILABLE.
        :param failures: Statuses that end the wait with an error. Defaults
            to the 'error' status.
        :param interval: Seconds between two checks.
        :param wait: Maximum seconds to wait.
        :returns: The volume in its desired status.
        """
        if failures is None:
            failures = [consts.VOLUME_STATUS_ERROR]

        volume = self.conn.block_storage.get_volume(volume_id)
        return self.conn.block_storage.wait_for_status(
            volume, status=status, failures=failures, interval=interval,
            wait=wait)
