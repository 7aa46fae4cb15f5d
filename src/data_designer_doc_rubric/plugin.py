from data_designer.plugins.plugin import Plugin, PluginType

doc_rubric_plugin = Plugin(
    config_qualified_name="data_designer_doc_rubric.config.DocumentRubricColumnConfig",
    impl_qualified_name="data_designer_doc_rubric.generator.DocumentRubricColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
