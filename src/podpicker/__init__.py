"""
podpicker: choose a worker pod from a Kubernetes Deployment's running replicas.
"""

__version__ = "0.1.0"
