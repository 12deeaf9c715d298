from Tree_Digest.cli.app import app


def main():
    app(prog_name="tree-digest")


if __name__ == "__main__":
    main()
