from flask import Blueprint


class BaseBlueprint(Blueprint):
    """Blueprint that remembers which module it belongs to.

    The module manager relies on ``module_name`` to report what it registered.
    """

    def __init__(self, name, import_name, url_prefix=None, template_folder=None):
        super().__init__(name, import_name, url_prefix=url_prefix, template_folder=template_folder)
        self.module_name = name
