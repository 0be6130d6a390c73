"""Base image recipe.

dri never builds the base image itself. The ``build`` command prints this
recipe and the matching build command so the operator can review and run
them by hand.
"""

from __future__ import annotations

from dri.constants import BASE_IMAGE, SSH_PORT

CONTAINERFILE_NAME = "Containerfile"

CONTAINERFILE = f"""\
FROM docker.io/library/debian:stable-slim

RUN apt-get update \\
    && apt-get install -y --no-install-recommends openssh-server ca-certificates \\
    && rm -rf /var/lib/apt/lists/* \\
    && mkdir -p /run/sshd /root/.ssh \\
    && chmod 700 /root/.ssh

RUN sed -i \\
        -e 's/^#\\?PermitRootLogin .*/PermitRootLogin prohibit-password/' \\
        -e 's/^#\\?PasswordAuthentication .*/PasswordAuthentication no/' \\
        /etc/ssh/sshd_config

COPY authorized_keys /root/.ssh/authorized_keys
RUN chmod 600 /root/.ssh/authorized_keys

EXPOSE {SSH_PORT}
CMD ["/usr/sbin/sshd", "-D", "-e"]
"""


def build_command(executable: str) -> str:
    """Return the command line that builds the base image from the recipe."""
    return f"{executable} build --tag {BASE_IMAGE} --file {CONTAINERFILE_NAME} ."
