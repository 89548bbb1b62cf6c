"""EPP extensions: NameStore, consolidate (sync) and RGP restore."""