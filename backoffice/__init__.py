"""组织架构后台管理服务。"""
