"""
Page component registry
Every page service registers here so the API index and the static
exporter can discover the pages it renders.
"""


class ComponentRegistry:
    """Registry of page services, keyed by component name"""

    def __init__(self):
        self.components = {}

    def register_component(self, name, component_class):
        if name in self.components and self.components[name] is not component_class:
            raise ValueError(f'Component already registered: {name}')
        self.components[name] = component_class

    def page_map(self):
        """Component name -> page paths it renders, in name order"""
        return {
            name: component_class().static_paths()
            for name, component_class in sorted(self.components.items())
        }

    def static_paths(self):
        """Every renderable page path, without duplicates"""
        paths = []
        for component_paths in self.page_map().values():
            for path in component_paths:
                if path not in paths:
                    paths.append(path)
        return paths


# Global registry instance
registry = ComponentRegistry()


def register_component(name):
    """Class decorator adding a page service to the registry"""
    def decorator(component_class):
        registry.register_component(name, component_class)
        return component_class
    return decorator


__all__ = ['ComponentRegistry', 'registry', 'register_component']
