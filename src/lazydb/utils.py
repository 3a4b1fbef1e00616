from importlib import import_module


def import_string(dotted_path):
    """Resolve ``package.module.Name`` to the object it names."""
    try:
        module_path, attr_name = dotted_path.rsplit('.', 1)
    except ValueError as err:
        raise ImportError("%s is not a dotted path to a driver class" % dotted_path) from err

    try:
        module = import_module(module_path)
    except ImportError as err:
        raise ImportError('Could not import driver module %s: "%s"' % (module_path, err)) from err

    try:
        return getattr(module, attr_name)
    except AttributeError:
        raise ImportError('Driver module "%s" has no attribute "%s"' % (module_path, attr_name))


def resolve_driver(driver):
    """Accept a driver instance, a driver class or a dotted path and return an instance."""
    if isinstance(driver, str):
        driver = import_string(driver)
    if isinstance(driver, type):
        driver = driver()
    return driver
