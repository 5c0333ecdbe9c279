"""Builders for Vulkan setup structures with their type tag and common defaults filled in."""

from __future__ import annotations

from enum import IntEnum
from types import SimpleNamespace
from typing import Any, Iterable, Optional, Sequence

QUEUE_FAMILY_IGNORED = 0xFFFFFFFF
"""Queue family index meaning "no ownership transfer"."""

NULL_HANDLE = None
"""Value of a handle that refers to no object."""


class StructureType(IntEnum):
    """Values of the ``sType`` member that tags each extensible Vulkan structure."""

    SUBMIT_INFO = 4
    MEMORY_ALLOCATE_INFO = 5
    MAPPED_MEMORY_RANGE = 6
    BIND_SPARSE_INFO = 7
    FENCE_CREATE_INFO = 8
    SEMAPHORE_CREATE_INFO = 9
    EVENT_CREATE_INFO = 10
    QUERY_POOL_CREATE_INFO = 11
    BUFFER_CREATE_INFO = 12
    BUFFER_VIEW_CREATE_INFO = 13
    IMAGE_CREATE_INFO = 14
    IMAGE_VIEW_CREATE_INFO = 15
    SHADER_MODULE_CREATE_INFO = 16
    PIPELINE_CACHE_CREATE_INFO = 17
    PIPELINE_SHADER_STAGE_CREATE_INFO = 18
    PIPELINE_VERTEX_INPUT_STATE_CREATE_INFO = 19
    PIPELINE_INPUT_ASSEMBLY_STATE_CREATE_INFO = 20
    PIPELINE_TESSELLATION_STATE_CREATE_INFO = 21
    PIPELINE_VIEWPORT_STATE_CREATE_INFO = 22
    PIPELINE_RASTERIZATION_STATE_CREATE_INFO = 23
    PIPELINE_MULTISAMPLE_STATE_CREATE_INFO = 24
    PIPELINE_DEPTH_STENCIL_STATE_CREATE_INFO = 25
    PIPELINE_COLOR_BLEND_STATE_CREATE_INFO = 26
    PIPELINE_DYNAMIC_STATE_CREATE_INFO = 27
    GRAPHICS_PIPELINE_CREATE_INFO = 28
    COMPUTE_PIPELINE_CREATE_INFO = 29
    PIPELINE_LAYOUT_CREATE_INFO = 30
    SAMPLER_CREATE_INFO = 31
    DESCRIPTOR_SET_LAYOUT_CREATE_INFO = 32
    DESCRIPTOR_POOL_CREATE_INFO = 33
    DESCRIPTOR_SET_ALLOCATE_INFO = 34
    WRITE_DESCRIPTOR_SET = 35
    COPY_DESCRIPTOR_SET = 36
    FRAMEBUFFER_CREATE_INFO = 37
    RENDER_PASS_CREATE_INFO = 38
    COMMAND_POOL_CREATE_INFO = 39
    COMMAND_BUFFER_ALLOCATE_INFO = 40
    COMMAND_BUFFER_INHERITANCE_INFO = 41
    COMMAND_BUFFER_BEGIN_INFO = 42
    RENDER_PASS_BEGIN_INFO = 43
    BUFFER_MEMORY_BARRIER = 44
    IMAGE_MEMORY_BARRIER = 45
    MEMORY_BARRIER = 46
    ACCELERATION_STRUCTURE_BUILD_GEOMETRY_INFO_KHR = 1000150000
    ACCELERATION_STRUCTURE_GEOMETRY_KHR = 1000150006
    WRITE_DESCRIPTOR_SET_ACCELERATION_STRUCTURE_KHR = 1000150007
    ACCELERATION_STRUCTURE_BUILD_SIZES_INFO_KHR = 1000150020
    RAY_TRACING_PIPELINE_CREATE_INFO_KHR = 1000347000
    RAY_TRACING_SHADER_GROUP_CREATE_INFO_KHR = 1000347001


class VkStruct(SimpleNamespace):
    """A Vulkan structure value: its type name and the members that were set.

    Members not given are zero in the structure and are simply absent here.
    """

    def __init__(self, type_name: str, **fields: Any) -> None:
        super().__init__(type_name=type_name, **fields)


def _tagged(type_name: str, s_type: StructureType, **fields: Any) -> VkStruct:
    return VkStruct(type_name, s_type=s_type, **fields)


def memory_allocate_info(size: int, mem_type_index: int) -> VkStruct:
    return _tagged(
        "VkMemoryAllocateInfo",
        StructureType.MEMORY_ALLOCATE_INFO,
        allocation_size=size,
        memory_type_index=mem_type_index,
    )


def mapped_memory_range() -> VkStruct:
    return _tagged("VkMappedMemoryRange", StructureType.MAPPED_MEMORY_RANGE)


def command_buffer_allocate_info(command_pool: Any, level: int, buffer_count: int) -> VkStruct:
    return _tagged(
        "VkCommandBufferAllocateInfo",
        StructureType.COMMAND_BUFFER_ALLOCATE_INFO,
        command_pool=command_pool,
        level=level,
        command_buffer_count=buffer_count,
    )


def command_pool_create_info() -> VkStruct:
    return _tagged("VkCommandPoolCreateInfo", StructureType.COMMAND_POOL_CREATE_INFO)


def command_buffer_begin_info() -> VkStruct:
    return _tagged("VkCommandBufferBeginInfo", StructureType.COMMAND_BUFFER_BEGIN_INFO)


def command_buffer_inheritance_info() -> VkStruct:
    return _tagged(
        "VkCommandBufferInheritanceInfo", StructureType.COMMAND_BUFFER_INHERITANCE_INFO
    )


def render_pass_begin_info() -> VkStruct:
    return _tagged("VkRenderPassBeginInfo", StructureType.RENDER_PASS_BEGIN_INFO)


def render_pass_create_info() -> VkStruct:
    return _tagged("VkRenderPassCreateInfo", StructureType.RENDER_PASS_CREATE_INFO)


def image_memory_barrier() -> VkStruct:
    """An image memory barrier with no queue family ownership transfer."""
    return _tagged(
        "VkImageMemoryBarrier",
        StructureType.IMAGE_MEMORY_BARRIER,
        src_queue_family_index=QUEUE_FAMILY_IGNORED,
        dst_queue_family_index=QUEUE_FAMILY_IGNORED,
    )


def buffer_memory_barrier() -> VkStruct:
    """A buffer memory barrier with no queue family ownership transfer."""
    return _tagged(
        "VkBufferMemoryBarrier",
        StructureType.BUFFER_MEMORY_BARRIER,
        src_queue_family_index=QUEUE_FAMILY_IGNORED,
        dst_queue_family_index=QUEUE_FAMILY_IGNORED,
    )


def memory_barrier() -> VkStruct:
    return _tagged("VkMemoryBarrier", StructureType.MEMORY_BARRIER)


def image_create_info() -> VkStruct:
    return _tagged("VkImageCreateInfo", StructureType.IMAGE_CREATE_INFO)


def image_view_create_info() -> VkStruct:
    return _tagged("VkImageViewCreateInfo", StructureType.IMAGE_VIEW_CREATE_INFO)


def framebuffer_create_info() -> VkStruct:
    return _tagged("VkFramebufferCreateInfo", StructureType.FRAMEBUFFER_CREATE_INFO)


def semaphore_create_info() -> VkStruct:
    return _tagged("VkSemaphoreCreateInfo", StructureType.SEMAPHORE_CREATE_INFO)


def fence_create_info(flags: int = 0) -> VkStruct:
    return _tagged("VkFenceCreateInfo", StructureType.FENCE_CREATE_INFO, flags=flags)


def event_create_info() -> VkStruct:
    return _tagged("VkEventCreateInfo", StructureType.EVENT_CREATE_INFO)


def submit_info(command_buffers: Iterable[Any]) -> VkStruct:
    buffers = tuple(command_buffers)
    return _tagged(
        "VkSubmitInfo",
        StructureType.SUBMIT_INFO,
        command_buffer_count=len(buffers),
        command_buffers=buffers,
    )


def viewport(
    width: float,
    height: float,
    x: float = 0.0,
    y: float = 0.0,
    min_depth: float = 0.0,
    max_depth: float = 1.0,
) -> VkStruct:
    return VkStruct(
        "VkViewport",
        x=float(x),
        y=float(y),
        width=float(width),
        height=float(height),
        min_depth=float(min_depth),
        max_depth=float(max_depth),
    )


def rect2d(width: int, height: int, offset_x: int = 0, offset_y: int = 0) -> VkStruct:
    return VkStruct(
        "VkRect2D",
        extent=VkStruct("VkExtent2D", width=width, height=height),
        offset=VkStruct("VkOffset2D", x=offset_x, y=offset_y),
    )


def buffer_create_info(usage: int = 0, size: int = 0) -> VkStruct:
    return _tagged(
        "VkBufferCreateInfo", StructureType.BUFFER_CREATE_INFO, usage=usage, size=size
    )


def descriptor_pool_create_info(pool_sizes: Iterable[VkStruct], max_sets: int) -> VkStruct:
    sizes = tuple(pool_sizes)
    return _tagged(
        "VkDescriptorPoolCreateInfo",
        StructureType.DESCRIPTOR_POOL_CREATE_INFO,
        pool_size_count=len(sizes),
        pool_sizes=sizes,
        max_sets=max_sets,
    )


def descriptor_pool_size(type: int, descriptor_count: int) -> VkStruct:  # noqa: A002
    return VkStruct("VkDescriptorPoolSize", type=type, descriptor_count=descriptor_count)


def descriptor_set_layout_binding(
    type: int,  # noqa: A002
    stage_flags: int,
    binding: int,
    descriptor_count: int = 1,
    immutable_samplers: Optional[Sequence[Any]] = None,
) -> VkStruct:
    return VkStruct(
        "VkDescriptorSetLayoutBinding",
        descriptor_type=type,
        stage_flags=stage_flags,
        binding=binding,
        descriptor_count=descriptor_count,
        immutable_samplers=None if immutable_samplers is None else tuple(immutable_samplers),
    )


def descriptor_set_layout_create_info(bindings: Iterable[VkStruct]) -> VkStruct:
    items = tuple(bindings)
    return _tagged(
        "VkDescriptorSetLayoutCreateInfo",
        StructureType.DESCRIPTOR_SET_LAYOUT_CREATE_INFO,
        bindings=items,
        binding_count=len(items),
    )


def descriptor_set_allocate_info(descriptor_pool: Any, set_layouts: Iterable[Any]) -> VkStruct:
    layouts = tuple(set_layouts)
    return _tagged(
        "VkDescriptorSetAllocateInfo",
        StructureType.DESCRIPTOR_SET_ALLOCATE_INFO,
        descriptor_pool=descriptor_pool,
        set_layouts=layouts,
        descriptor_set_count=len(layouts),
    )


def descriptor_image_info(sampler: Any, image_view: Any, image_layout: int) -> VkStruct:
    return VkStruct(
        "VkDescriptorImageInfo",
        sampler=sampler,
        image_view=image_view,
        image_layout=image_layout,
    )


def write_descriptor_set(
    dst_set: Any,
    type: int,  # noqa: A002
    binding: int,
    buffer_info: Any = None,
    image_info: Any = None,
    descriptor_count: int = 1,
) -> VkStruct:
    """Describe a descriptor write of either buffer or image descriptors.

    Exactly one of ``buffer_info`` and ``image_info`` must be given.
    """
    if (buffer_info is None) == (image_info is None):
        raise ValueError("give exactly one of buffer_info and image_info")
    fields: dict = {
        "dst_set": dst_set,
        "descriptor_type": type,
        "dst_binding": binding,
        "descriptor_count": descriptor_count,
    }
    if buffer_info is not None:
        fields["buffer_info"] = buffer_info
    else:
        fields["image_info"] = image_info
    return _tagged("VkWriteDescriptorSet", StructureType.WRITE_DESCRIPTOR_SET, **fields)