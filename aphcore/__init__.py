"""Engine core building blocks: a thread-safe deque, thread naming, input keys, key translation, GPU resource descriptions and Vulkan setup-structure builders."""

__version__ = "0.1.0"

__all__ = [
    "thread_safe_queue",
    "thread_utils",
    "input",
    "wsi_keys",
    "gpu_resource",
    "vk_init",
    "vk_pipeline_init",
]