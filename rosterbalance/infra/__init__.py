"""基础设施层: 配置管理与评分/分队算法"""
