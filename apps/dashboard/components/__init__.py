"""
Component registry for dashboard
Each page component registers its service class here so the app can report
what is loaded.
"""


class ComponentRegistry:
    """Registry for dashboard components"""

    def __init__(self):
        self.components = {}

    def register_component(self, name, component_class):
        """Register a dashboard component"""
        self.components[name] = component_class

    def describe(self):
        """Component name -> service class name, for status output"""
        return {name: cls.__name__ for name, cls in sorted(self.components.items())}


# Global registry instance
registry = ComponentRegistry()


def register_component(name):
    """Decorator for registering components"""
    def decorator(component_class):
        registry.register_component(name, component_class)
        return component_class
    return decorator


__all__ = ['ComponentRegistry', 'registry', 'register_component']
