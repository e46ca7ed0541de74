"""
# Function and data structure tools shared by the packages of the project.
"""
