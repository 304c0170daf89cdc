"""VRChime - VRChat 多开启动器"""
