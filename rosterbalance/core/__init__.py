"""
分队引擎核心层
数据模型、报告生成、候选方案生成及引擎入口
"""
