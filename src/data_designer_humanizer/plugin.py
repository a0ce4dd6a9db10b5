from data_designer.plugins.plugin import Plugin, PluginType

humanizer_plugin = Plugin(
    config_qualified_name="data_designer_humanizer.config.HumanizerColumnConfig",
    impl_qualified_name="data_designer_humanizer.generator.HumanizerColumnGenerator",
    plugin_type=PluginType.COLUMN_GENERATOR,
)
