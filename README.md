# aphcore

Core building blocks for a rendering engine, usable on their own. The package
has no dependencies beyond the standard library.

- `aphcore.thread_safe_queue.ThreadSafeQueue`: a double-ended queue whose
  operations each hold a lock, with stealing and rotation helpers.
- `aphcore.thread_utils`: name the calling thread with `set_name` and read the
  name back with `get_name`.
- `aphcore.input`: the `Key`, `MouseButton` and `KeyState` enums, and
  `key_to_str`.
- `aphcore.wsi_keys`: map GLFW and SDL2 key codes to `Key` with
  `glfw_key_cast` and `sdl2_key_cast`; window settings are held in
  `WSICreateInfo`.
- `aphcore.gpu_resource`: enums and dataclasses describing GPU resources, such
  as `Format`, `ResourceState`, `ColorAttachment`, `StencilState`,
  `ResourceHandle` and `UIComponentDesc`.
- `aphcore.vk_init` and `aphcore.vk_pipeline_init`: builders for Vulkan
  setup structures, returned as `VkStruct` values tagged with their
  `StructureType`.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Thread-safe queue

```python
from aphcore.thread_safe_queue import ThreadSafeQueue

queue = ThreadSafeQueue()
queue.push_back(1)
queue.push_back(2)
queue.push_front(0)

assert queue.pop_front() == 0
assert queue.steal() == 2          # takes from the back
assert queue.pop_front() == 1
assert queue.pop_front() is None   # empty queue gives None
```

`rotate_to_front(item)` moves an item to the front, inserting it if it is not
present. `copy_front_and_rotate_to_back()` returns the front item after moving
it to the back, which makes round-robin selection a single call. `len(queue)`
gives the number of items.

## Thread names

```python
from aphcore.thread_utils import get_name, set_name

set_name("worker:0")
assert get_name() == "worker:0"
```

`set_name` raises `ValueError` for a name longer than 15 bytes in UTF-8
(`thread_utils.MAX_NAME_LENGTH`).

## Input keys

```python
from aphcore.input import Key, key_to_str
from aphcore.wsi_keys import glfw_key_cast, sdl2_key_cast

assert key_to_str(Key.A) == "A"
assert key_to_str(Key.DIGIT_5) == "5"
assert key_to_str(Key.LEFT_CTRL) == "Left Ctrl"
assert key_to_str(999) == "Invalid Key"

assert glfw_key_cast(65) is Key.A
assert sdl2_key_cast(ord("a")) is Key.A
assert sdl2_key_cast(12345) is Key.UNKNOWN
```

## GPU resource descriptions

```python
from aphcore.gpu_resource import ColorAttachment, Format, ResourceHandle, ResourceState

state = ResourceState.SHADER_RESOURCE | ResourceState.COPY_DEST
attachment = ColorAttachment(format=Format.BGRA8_UNORM, blend_enabled=True)
handle = ResourceHandle(handle=7, create_info=attachment)
```

`DebugLabel` requires a colour of exactly four components and raises
`ValueError` otherwise. `ShaderConstant.size` is the length of its bytes.

## Vulkan setup structures

```python
from aphcore.vk_init import QUEUE_FAMILY_IGNORED, StructureType, fence_create_info, image_memory_barrier
from aphcore.vk_pipeline_init import pipeline_layout_create_info

fence = fence_create_info(flags=1)
assert fence.s_type == StructureType.FENCE_CREATE_INFO
assert fence.type_name == "VkFenceCreateInfo"

barrier = image_memory_barrier()
assert barrier.src_queue_family_index == QUEUE_FAMILY_IGNORED

layout = pipeline_layout_create_info(["set0", "set1"])
assert layout.set_layout_count == 2
```

Members that the structure would leave zero are simply absent from a
`VkStruct`. `write_descriptor_set` takes exactly one of `buffer_info` and
`image_info` and raises `ValueError` otherwise.

## What this package does not do

- It has no thread pool and no task scheduler. `ThreadSafeQueue` is the
  per-worker queue such a pool would use, but running work on threads is left
  to the caller.
- It opens no window and reads no input devices. `wsi_keys` only translates key
  codes that a windowing library has already delivered.
- It does not talk to a GPU or a Vulkan driver. The builders produce plain
  Python values describing structures; nothing is created or submitted.