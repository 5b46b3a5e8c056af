"""解析与查询核心。"""
