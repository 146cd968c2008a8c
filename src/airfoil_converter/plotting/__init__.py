from airfoil_converter.plotting.viewport_projector import project, compute_domains, drawable_size

__all__ = [
    'project',
    'compute_domains',
    'drawable_size'
]
