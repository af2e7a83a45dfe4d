"""Render inline markup in one line — zero config, zero deps."""

from inkling import render

print(render("The *quick*, ~red~ brown fox jumps over a _*lazy dog*_."))
