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
Blockdrv exception subclasses.
"""

from oslo_log import log as logging

from blockdrv.common.i18n import _

LOG = logging.getLogger(__name__)


class BlockdrvException(Exception):
    """Base Blockdrv Exception.

    To correctly use this class, inherit from it and define a 'msg_fmt'
    property. That msg_fmt will get printed with the keyword arguments
    provided to the constructor.
    """
    message = _("An unknown exception occurred.")

    def __init__(self, **kwargs):
        self.kwargs = kwargs

        try:
            self.message = self.msg_fmt % kwargs
            # if last char is '.', wipe out redundant '.'
            if self.message[-1] == '.':
                self.message = self.message.rstrip('.') + '.'
        except KeyError:
            # kwargs doesn't match a variable in the message
            LOG.exception('Exception in string format operation')
            for name, value in kwargs.items():
                LOG.error("%s: %s", name, value)
            self.message = self.msg_fmt

    def __str__(self):
        return str(self.message)


class InvalidParameter(BlockdrvException):
    msg_fmt = _("Invalid value '%(value)s' specified for '%(name)s'")


class ResourceNotFound(BlockdrvException):
    """Generic exception for resource not found.

    The resource type here can be 'volume', 'snapshot' or any other block
    storage object a driver resolves by name.
    """
    msg_fmt = _("The %(type)s '%(id)s' could not be found.")


class MultipleChoices(BlockdrvException):
    msg_fmt = _("Multiple results found matching the query criteria "
                "%(arg)s. Please be more specific.")


class InternalError(BlockdrvException):
    """A base class for internal exceptions in blockdrv.

    Raised when a driver cannot be set up, for example when the connection
    to the cloud cannot be initialized. Errors coming back from the block
    storage API itself are not wrapped.
    """
    msg_fmt = _("%(message)s")
    message = _('Internal error happened')

    def __init__(self, **kwargs):
        self.code = kwargs.pop('code', 500)
        self.message = kwargs.pop('message', self.message) or self.message
        super(InternalError, self).__init__(
            code=self.code, message=self.message, **kwargs)
