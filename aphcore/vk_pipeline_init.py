"""Builders for Vulkan pipeline, shader and ray-tracing setup structures."""

from __future__ import annotations

from typing import Any, Iterable, Union

from aphcore.vk_init import NULL_HANDLE, StructureType, VkStruct

COLOR_COMPONENT_R_BIT = 0x1
COLOR_COMPONENT_G_BIT = 0x2
COLOR_COMPONENT_B_BIT = 0x4
COLOR_COMPONENT_A_BIT = 0x8
COLOR_COMPONENT_ALL = (
    COLOR_COMPONENT_R_BIT | COLOR_COMPONENT_G_BIT | COLOR_COMPONENT_B_BIT | COLOR_COMPONENT_A_BIT
)

COMPARE_OP_ALWAYS = 7
SAMPLE_COUNT_1_BIT = 0x1


def _tagged(type_name: str, s_type: StructureType, **fields: Any) -> VkStruct:
    return VkStruct(type_name, s_type=s_type, **fields)


def vertex_input_binding_description(binding: int, stride: int, input_rate: int) -> VkStruct:
    return VkStruct(
        "VkVertexInputBindingDescription",
        binding=binding,
        stride=stride,
        input_rate=input_rate,
    )


def vertex_input_attribute_description(
    binding: int, location: int, format: int, offset: int  # noqa: A002
) -> VkStruct:
    return VkStruct(
        "VkVertexInputAttributeDescription",
        location=location,
        binding=binding,
        format=format,
        offset=offset,
    )


def pipeline_vertex_input_state_create_info(
    binding_descriptions: Iterable[VkStruct] = (),
    attribute_descriptions: Iterable[VkStruct] = (),
) -> VkStruct:
    bindings = tuple(binding_descriptions)
    attributes = tuple(attribute_descriptions)
    return _tagged(
        "VkPipelineVertexInputStateCreateInfo",
        StructureType.PIPELINE_VERTEX_INPUT_STATE_CREATE_INFO,
        vertex_binding_description_count=len(bindings),
        vertex_binding_descriptions=bindings,
        vertex_attribute_description_count=len(attributes),
        vertex_attribute_descriptions=attributes,
    )


def pipeline_input_assembly_state_create_info(
    topology: int, flags: int, primitive_restart_enable: bool
) -> VkStruct:
    return _tagged(
        "VkPipelineInputAssemblyStateCreateInfo",
        StructureType.PIPELINE_INPUT_ASSEMBLY_STATE_CREATE_INFO,
        topology=topology,
        flags=flags,
        primitive_restart_enable=bool(primitive_restart_enable),
    )


def pipeline_rasterization_state_create_info(
    polygon_mode: int, cull_mode: int, front_face: int, flags: int = 0
) -> VkStruct:
    """Rasterization state without depth clamping and with a line width of 1."""
    return _tagged(
        "VkPipelineRasterizationStateCreateInfo",
        StructureType.PIPELINE_RASTERIZATION_STATE_CREATE_INFO,
        polygon_mode=polygon_mode,
        cull_mode=cull_mode,
        front_face=front_face,
        flags=flags,
        depth_clamp_enable=False,
        line_width=1.0,
    )


def pipeline_color_blend_attachment_state(
    color_write_mask: int = COLOR_COMPONENT_ALL, blend_enable: bool = False
) -> VkStruct:
    return VkStruct(
        "VkPipelineColorBlendAttachmentState",
        color_write_mask=color_write_mask,
        blend_enable=bool(blend_enable),
    )


def pipeline_color_blend_state_create_info(attachments: Iterable[VkStruct]) -> VkStruct:
    items = tuple(attachments)
    return _tagged(
        "VkPipelineColorBlendStateCreateInfo",
        StructureType.PIPELINE_COLOR_BLEND_STATE_CREATE_INFO,
        attachment_count=len(items),
        attachments=items,
    )


def pipeline_depth_stencil_state_create_info(
    depth_test_enable: bool, depth_write_enable: bool, depth_compare_op: int
) -> VkStruct:
    """Depth state whose back-face stencil test always passes."""
    return _tagged(
        "VkPipelineDepthStencilStateCreateInfo",
        StructureType.PIPELINE_DEPTH_STENCIL_STATE_CREATE_INFO,
        depth_test_enable=bool(depth_test_enable),
        depth_write_enable=bool(depth_write_enable),
        depth_compare_op=depth_compare_op,
        back=VkStruct("VkStencilOpState", compare_op=COMPARE_OP_ALWAYS),
    )


def pipeline_viewport_state_create_info(
    viewport_count: int, scissor_count: int, flags: int = 0
) -> VkStruct:
    return _tagged(
        "VkPipelineViewportStateCreateInfo",
        StructureType.PIPELINE_VIEWPORT_STATE_CREATE_INFO,
        viewport_count=viewport_count,
        scissor_count=scissor_count,
        flags=flags,
    )


def pipeline_multisample_state_create_info(
    rasterization_samples: int = SAMPLE_COUNT_1_BIT, flags: int = 0
) -> VkStruct:
    return _tagged(
        "VkPipelineMultisampleStateCreateInfo",
        StructureType.PIPELINE_MULTISAMPLE_STATE_CREATE_INFO,
        rasterization_samples=rasterization_samples,
        flags=flags,
    )


def pipeline_dynamic_state_create_info(dynamic_states: Iterable[int], flags: int = 0) -> VkStruct:
    states = tuple(dynamic_states)
    return _tagged(
        "VkPipelineDynamicStateCreateInfo",
        StructureType.PIPELINE_DYNAMIC_STATE_CREATE_INFO,
        dynamic_states=states,
        dynamic_state_count=len(states),
        flags=flags,
    )


def pipeline_tessellation_state_create_info(patch_control_points: int) -> VkStruct:
    return _tagged(
        "VkPipelineTessellationStateCreateInfo",
        StructureType.PIPELINE_TESSELLATION_STATE_CREATE_INFO,
        patch_control_points=patch_control_points,
    )


def pipeline_layout_create_info(
    set_layouts: Union[int, Iterable[Any]] = 1,
    push_constant_ranges: Iterable[VkStruct] = (),
) -> VkStruct:
    """Describe a pipeline layout.

    ``set_layouts`` is either the layouts themselves or, when the layouts are
    filled in later, just their number.
    """
    ranges = tuple(push_constant_ranges)
    if isinstance(set_layouts, int):
        if set_layouts < 0:
            raise ValueError("the set layout count must not be negative")
        fields: dict = {"set_layout_count": set_layouts}
    else:
        layouts = tuple(set_layouts)
        fields = {"set_layout_count": len(layouts), "set_layouts": layouts}
    if ranges:
        fields["push_constant_range_count"] = len(ranges)
        fields["push_constant_ranges"] = ranges
    return _tagged(
        "VkPipelineLayoutCreateInfo", StructureType.PIPELINE_LAYOUT_CREATE_INFO, **fields
    )


def graphics_pipeline_create_info(
    layout: Any = NULL_HANDLE, render_pass: Any = NULL_HANDLE, flags: int = 0
) -> VkStruct:
    """Graphics pipeline description that derives from no base pipeline."""
    return _tagged(
        "VkGraphicsPipelineCreateInfo",
        StructureType.GRAPHICS_PIPELINE_CREATE_INFO,
        layout=layout,
        render_pass=render_pass,
        flags=flags,
        base_pipeline_index=-1,
        base_pipeline_handle=NULL_HANDLE,
    )


def compute_pipeline_create_info(layout: Any, flags: int = 0) -> VkStruct:
    return _tagged(
        "VkComputePipelineCreateInfo",
        StructureType.COMPUTE_PIPELINE_CREATE_INFO,
        layout=layout,
        flags=flags,
    )


def push_constant_range(stage_flags: int, size: int, offset: int) -> VkStruct:
    return VkStruct("VkPushConstantRange", stage_flags=stage_flags, offset=offset, size=size)


def bind_sparse_info() -> VkStruct:
    return _tagged("VkBindSparseInfo", StructureType.BIND_SPARSE_INFO)


def specialization_map_entry(constant_id: int, offset: int, size: int) -> VkStruct:
    """Map a specialization constant to a byte range of the constant data."""
    return VkStruct(
        "VkSpecializationMapEntry", constant_id=constant_id, offset=offset, size=size
    )


def specialization_info(map_entries: Iterable[VkStruct], data: bytes) -> VkStruct:
    """Bundle map entries with the bytes they refer to, for one shader stage."""
    entries = tuple(map_entries)
    payload = bytes(data)
    return VkStruct(
        "VkSpecializationInfo",
        map_entry_count=len(entries),
        map_entries=entries,
        data_size=len(payload),
        data=payload,
    )


def acceleration_structure_geometry() -> VkStruct:
    return _tagged(
        "VkAccelerationStructureGeometryKHR",
        StructureType.ACCELERATION_STRUCTURE_GEOMETRY_KHR,
    )


def acceleration_structure_build_geometry_info() -> VkStruct:
    return _tagged(
        "VkAccelerationStructureBuildGeometryInfoKHR",
        StructureType.ACCELERATION_STRUCTURE_BUILD_GEOMETRY_INFO_KHR,
    )


def acceleration_structure_build_sizes_info() -> VkStruct:
    return _tagged(
        "VkAccelerationStructureBuildSizesInfoKHR",
        StructureType.ACCELERATION_STRUCTURE_BUILD_SIZES_INFO_KHR,
    )


def ray_tracing_shader_group_create_info() -> VkStruct:
    return _tagged(
        "VkRayTracingShaderGroupCreateInfoKHR",
        StructureType.RAY_TRACING_SHADER_GROUP_CREATE_INFO_KHR,
    )


def ray_tracing_pipeline_create_info() -> VkStruct:
    return _tagged(
        "VkRayTracingPipelineCreateInfoKHR",
        StructureType.RAY_TRACING_PIPELINE_CREATE_INFO_KHR,
    )


def write_descriptor_set_acceleration_structure() -> VkStruct:
    return _tagged(
        "VkWriteDescriptorSetAccelerationStructureKHR",
        StructureType.WRITE_DESCRIPTOR_SET_ACCELERATION_STRUCTURE_KHR,
    )


def pipeline_shader_stage_create_info(stage: int, module: Any, name: str) -> VkStruct:
    """Describe one shader stage: its stage bit, shader module and entry point."""
    return _tagged(
        "VkPipelineShaderStageCreateInfo",
        StructureType.PIPELINE_SHADER_STAGE_CREATE_INFO,
        next=None,
        stage=stage,
        module=module,
        name=str(name),
    )