"""termpal - terminal colorschemes generated from images.

Samples an image, filters the samples in HSV space, quantizes them into an
8 colors palette and derives the 16 terminal colors from it. Results are
cached per settings and image name.
"""
