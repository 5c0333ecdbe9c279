import pytest

from aphcore import vk_init
from aphcore.vk_init import StructureType, VkStruct


def test_structure_type_documented_values():
    assert StructureType(4) is StructureType.SUBMIT_INFO
    assert StructureType(5) is StructureType.MEMORY_ALLOCATE_INFO
    assert StructureType(46) is StructureType.MEMORY_BARRIER


def test_queue_family_ignored_is_all_bits():
    barrier = vk_init.image_memory_barrier()
    assert barrier.src_queue_family_index == 0xFFFFFFFF
    assert barrier.dst_queue_family_index == 0xFFFFFFFF


@pytest.mark.parametrize(
    "builder, s_type, type_name",
    [
        (vk_init.mapped_memory_range, StructureType.MAPPED_MEMORY_RANGE, "VkMappedMemoryRange"),
        (vk_init.command_pool_create_info, StructureType.COMMAND_POOL_CREATE_INFO, "VkCommandPoolCreateInfo"),
        (vk_init.command_buffer_begin_info, StructureType.COMMAND_BUFFER_BEGIN_INFO, "VkCommandBufferBeginInfo"),
        (
            vk_init.command_buffer_inheritance_info,
            StructureType.COMMAND_BUFFER_INHERITANCE_INFO,
            "VkCommandBufferInheritanceInfo",
        ),
        (vk_init.render_pass_begin_info, StructureType.RENDER_PASS_BEGIN_INFO, "VkRenderPassBeginInfo"),
        (vk_init.render_pass_create_info, StructureType.RENDER_PASS_CREATE_INFO, "VkRenderPassCreateInfo"),
        (vk_init.memory_barrier, StructureType.MEMORY_BARRIER, "VkMemoryBarrier"),
        (vk_init.image_create_info, StructureType.IMAGE_CREATE_INFO, "VkImageCreateInfo"),
        (vk_init.image_view_create_info, StructureType.IMAGE_VIEW_CREATE_INFO, "VkImageViewCreateInfo"),
        (vk_init.framebuffer_create_info, StructureType.FRAMEBUFFER_CREATE_INFO, "VkFramebufferCreateInfo"),
        (vk_init.semaphore_create_info, StructureType.SEMAPHORE_CREATE_INFO, "VkSemaphoreCreateInfo"),
        (vk_init.event_create_info, StructureType.EVENT_CREATE_INFO, "VkEventCreateInfo"),
    ],
)
def test_plain_tagged_structs(builder, s_type, type_name):
    info = builder()
    assert info.s_type is s_type
    assert info.type_name == type_name


def test_memory_allocate_info():
    info = vk_init.memory_allocate_info(1024, 3)
    assert info.s_type is StructureType.MEMORY_ALLOCATE_INFO
    assert info.allocation_size == 1024
    assert info.memory_type_index == 3


def test_command_buffer_allocate_info():
    pool = object()
    info = vk_init.command_buffer_allocate_info(pool, 1, 4)
    assert info.command_pool is pool
    assert info.level == 1
    assert info.command_buffer_count == 4


@pytest.mark.parametrize("builder", [vk_init.image_memory_barrier, vk_init.buffer_memory_barrier])
def test_barriers_ignore_queue_families(builder):
    barrier = builder()
    assert barrier.src_queue_family_index == vk_init.QUEUE_FAMILY_IGNORED
    assert barrier.dst_queue_family_index == vk_init.QUEUE_FAMILY_IGNORED


def test_barrier_types():
    assert vk_init.image_memory_barrier().s_type is StructureType.IMAGE_MEMORY_BARRIER
    assert vk_init.buffer_memory_barrier().s_type is StructureType.BUFFER_MEMORY_BARRIER


def test_fence_create_info_flags():
    assert vk_init.fence_create_info().flags == 0
    assert vk_init.fence_create_info(1).flags == 1
    assert vk_init.fence_create_info().s_type is StructureType.FENCE_CREATE_INFO


def test_submit_info_counts_buffers():
    buffers = ["cb0", "cb1"]
    info = vk_init.submit_info(buffers)
    assert info.command_buffer_count == len(buffers)
    assert info.command_buffers == tuple(buffers)
    assert vk_init.submit_info([]).command_buffer_count == 0


def test_viewport_defaults():
    vp = vk_init.viewport(800, 600)
    assert (vp.width, vp.height) == (800.0, 600.0)
    assert (vp.x, vp.y) == (0.0, 0.0)
    assert vp.min_depth == 0.0
    assert vp.max_depth == 1.0


def test_viewport_explicit():
    vp = vk_init.viewport(10, 20, 1, 2, 0.25, 0.75)
    assert (vp.x, vp.y, vp.min_depth, vp.max_depth) == (1.0, 2.0, 0.25, 0.75)


def test_rect2d():
    rect = vk_init.rect2d(640, 480, 5, 7)
    assert (rect.extent.width, rect.extent.height) == (640, 480)
    assert (rect.offset.x, rect.offset.y) == (5, 7)
    origin = vk_init.rect2d(1, 1)
    assert (origin.offset.x, origin.offset.y) == (0, 0)


def test_buffer_create_info():
    info = vk_init.buffer_create_info(0x80, 256)
    assert info.s_type is StructureType.BUFFER_CREATE_INFO
    assert (info.usage, info.size) == (0x80, 256)
    empty = vk_init.buffer_create_info()
    assert (empty.usage, empty.size) == (0, 0)


def test_descriptor_pool_create_info():
    sizes = [vk_init.descriptor_pool_size(6, 10), vk_init.descriptor_pool_size(1, 4)]
    info = vk_init.descriptor_pool_create_info(sizes, 8)
    assert info.pool_size_count == len(sizes)
    assert info.pool_sizes == tuple(sizes)
    assert info.max_sets == 8
    assert sizes[0].type == 6 and sizes[0].descriptor_count == 10


def test_descriptor_set_layout_binding_defaults():
    binding = vk_init.descriptor_set_layout_binding(6, 0x10, 2)
    assert binding.descriptor_type == 6
    assert binding.stage_flags == 0x10
    assert binding.binding == 2
    assert binding.descriptor_count == 1
    assert binding.immutable_samplers is None


def test_descriptor_set_layout_create_info():
    bindings = [vk_init.descriptor_set_layout_binding(1, 1, n) for n in range(3)]
    info = vk_init.descriptor_set_layout_create_info(bindings)
    assert info.binding_count == len(bindings)
    assert info.bindings == tuple(bindings)
    assert info.s_type is StructureType.DESCRIPTOR_SET_LAYOUT_CREATE_INFO


def test_descriptor_set_allocate_info():
    info = vk_init.descriptor_set_allocate_info("pool", ["layout_a", "layout_b"])
    assert info.descriptor_pool == "pool"
    assert info.descriptor_set_count == 2
    assert info.set_layouts == ("layout_a", "layout_b")


def test_descriptor_image_info():
    info = vk_init.descriptor_image_info("sampler", "view", 5)
    assert (info.sampler, info.image_view, info.image_layout) == ("sampler", "view", 5)


def test_write_descriptor_set_buffer():
    buffer_info = VkStruct("VkDescriptorBufferInfo", buffer="buf", offset=0, range=64)
    write = vk_init.write_descriptor_set("set", 6, 0, buffer_info=buffer_info)
    assert write.s_type is StructureType.WRITE_DESCRIPTOR_SET
    assert write.buffer_info is buffer_info
    assert write.descriptor_count == 1
    assert not hasattr(write, "image_info")


def test_write_descriptor_set_image():
    image_info = vk_init.descriptor_image_info("s", "v", 5)
    write = vk_init.write_descriptor_set("set", 1, 3, image_info=image_info, descriptor_count=2)
    assert write.image_info is image_info
    assert write.dst_binding == 3
    assert write.descriptor_count == 2


def test_write_descriptor_set_requires_exactly_one_info():
    with pytest.raises(ValueError):
        vk_init.write_descriptor_set("set", 1, 0)
    with pytest.raises(ValueError):
        vk_init.write_descriptor_set("set", 1, 0, buffer_info="b", image_info="i")


def test_vk_struct_equality():
    assert vk_init.fence_create_info(0) == vk_init.fence_create_info(0)
    assert vk_init.fence_create_info(0) != vk_init.fence_create_info(1)