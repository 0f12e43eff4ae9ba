from kinecalc.cli.main import main

main()
