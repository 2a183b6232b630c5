import hydra
from omegaconf import OmegaConf


def register_resolvers() -> None:
    """Register the OmegaConf resolvers used by the ``config/`` YAML tree.

    ``${get_object:dotted.path}`` resolves to the Python object at that path,
    which is how problem files point at their objective function.
    """
    OmegaConf.register_new_resolver(
        "get_object", lambda obj: hydra.utils.get_object(obj), replace=True
    )
    OmegaConf.register_new_resolver("len", lambda arr: len(arr), replace=True)
