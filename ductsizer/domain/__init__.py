"""Pure fluid-mechanics building blocks for duct pressure-drop calculations"""
