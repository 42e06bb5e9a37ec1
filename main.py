from rajaongkir.scripts.ongkir_cli import main

# dotenv loading and logging setup happen inside main()
if __name__ == "__main__":
    raise SystemExit(main())
